#
#
#

from octodns.provider import ProviderException


class PowerDnsClientException(ProviderException):
    pass


class ConfigurationError(PowerDnsClientException):
    pass


class InvalidResponse(PowerDnsClientException):
    def __init__(self, status=None):
        super().__init__('Invalid HTTP response')
        self.status = status


class NotFound(PowerDnsClientException):
    def __init__(self):
        super().__init__('Service not found')


class Conflict(PowerDnsClientException):
    DEFAULT_MESSAGE = 'resource already exists'

    def __init__(self, message=None):
        super().__init__(message or self.DEFAULT_MESSAGE)


class DecodeError(PowerDnsClientException):
    pass
