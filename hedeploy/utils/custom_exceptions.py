class BaseCustomException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(BaseCustomException):
    def __init__(self, reason: str):
        super().__init__(f"Invalid configuration: {reason}")


class ResourceError(ConfigError):
    def __init__(self, resource_name: str, resource_dir: str):
        super().__init__(f'resource "{resource_name}" not found in "{resource_dir}"')
        self.resource_name = resource_name


class NetworkError(BaseCustomException):
    def __init__(self, reason: str):
        super().__init__(f"Failed to communicate with Hedera network: {reason}")


class VerificationError(BaseCustomException):
    def __init__(self, reason: str):
        super().__init__(f"Failed to communicate with verification server: {reason}")
