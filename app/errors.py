"""Problem set errors."""


class ProblemSetError(Exception):
    """Base error for problem set resolution."""

    def __init__(self, message: str = "Problem set error"):
        self.message = message
        super().__init__(self.message)


class UpstreamFailure(ProblemSetError):
    """Problem source errored or timed out."""

    def __init__(self, message: str = "Upstream fetch failed"):
        super().__init__(message)


class StorageFault(ProblemSetError):
    """Database unavailable or write rejected."""

    def __init__(self, message: str = "Storage fault"):
        super().__init__(message)


class NotProvisioned(ProblemSetError):
    """Partition read before it was provisioned."""

    def __init__(self, partition_key: str):
        self.partition_key = partition_key
        super().__init__(f"Partition not provisioned: {partition_key}")
