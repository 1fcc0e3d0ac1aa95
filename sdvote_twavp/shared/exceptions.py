"""
Exception hierarchy for the TWAVP strategies.

Exception Categories:
- RetryableException: Transient failures that may succeed on retry (RPC, network)
- NonRetryableException: Permanent failures that won't benefit from retry (bad data)
- ConfigurationException: Invalid strategy options or missing environment

Every exception raised during a strategy evaluation is fatal to that
evaluation. Nothing is retried or recovered inside this package; the
categories only tell the caller whether re-running the evaluation can help.
"""


class RetryableException(Exception):
    """
    Base class for exceptions that may succeed on retry.

    Use for transient failures like:
    - RPC timeouts
    - Rate limiting
    - Temporary network issues
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NonRetryableException(Exception):
    """
    Base class for exceptions that won't benefit from retry.

    Use for permanent failures like:
    - Invalid input data
    - Malformed responses
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationException(NonRetryableException):
    """
    Exception for configuration errors.

    Raised before any network activity when:
    - The sample count exceeds the cap or is below two
    - The whitelist exceeds the cap
    - A required option is missing or malformed
    - The sampling window reaches before genesis
    - A required environment variable is missing
    """

    pass


class MalformedBatchException(NonRetryableException):
    """
    Exception for a batch whose result count does not match its call list.

    The results can no longer be attributed to addresses, so the whole
    evaluation is aborted.
    """

    def __init__(self, block_number: int, expected: int, received: int):
        super().__init__(
            f"Malformed batch at block {block_number}: "
            f"expected {expected} results, received {received}"
        )
        self.block_number = block_number
        self.expected = expected
        self.received = received


class BatchExecutionException(RetryableException):
    """
    Exception for multicall failures (RPC errors, reverts, timeouts).

    Inherits from RetryableException because these failures are usually
    transient, but it is never retried here.
    """

    def __init__(self, message: str, block_number: int):
        super().__init__(message)
        self.block_number = block_number
