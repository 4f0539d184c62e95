"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Business Logic Failures (expected runtime issues, e.g. a bad scheduler URL)
3. Configuration Errors (a job/executor configuration that cannot be built)

Every error is raised to the immediate caller. Nothing in this package
catches and logs these - retry and reporting policy belong to the RPC layer
and the command line front end.

Exports:
    ContractViolationError: Wrong types crossing a component boundary
    BusinessLogicError: Base class for expected runtime failures
    ValidationError: Business rule validation failed
    EndpointValidationError: Scheduler address rejected (base)
    EndpointParseError: Scheduler address could not be parsed
    UnsupportedSchemeError: Scheduler address uses a scheme other than http(s)
    InvalidApiPathError: Scheduler address points somewhere other than /api
    ConfigurationError: Job or executor configuration error
    ThermosPayloadError: Thermos executor payload could not be built
"""


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These indicate:
    - Wrong types passed to functions
    - Enum type mismatches
    - Interface contract violations

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the calling code.

    Examples:
        - Batch sizes given as strings instead of ints
        - Container object without a build() method
    """
    pass


class BusinessLogicError(Exception):
    """
    Base class for expected runtime business logic failures.

    These are normal failures that occur during system operation
    and should be handled gracefully by the caller.
    """
    pass


class ValidationError(BusinessLogicError):
    """
    Business validation failed.

    Note: This is different from ContractViolationError.
    This is for business rule validation, not type contracts.
    """
    pass


class EndpointValidationError(ValidationError):
    """
    Scheduler endpoint address was rejected.

    The returned address must never be used when this is raised - the
    validator performs no partial normalization on failure.
    """
    pass


class EndpointParseError(EndpointValidationError):
    """
    Address could not be parsed as a URL.

    Examples:
        - Unbalanced IPv6 brackets ("http://[::1")
        - Non-numeric port ("example.com:abc")
        - Port out of range ("example.com:99999")
    """
    pass


class UnsupportedSchemeError(EndpointValidationError):
    """Address uses a protocol other than http or https."""
    pass


class InvalidApiPathError(EndpointValidationError):
    """Address path is not the scheduler API path."""
    pass


class ConfigurationError(Exception):
    """
    Job configuration error.

    Raised synchronously from the single call that could not complete.
    State unrelated to the failed call is left untouched.
    """
    pass


class ThermosPayloadError(ConfigurationError):
    """
    Thermos executor payload could not be built.

    Examples:
        - Process order references a process that was never added
        - Executor payload failed to serialize to JSON
    """
    pass
