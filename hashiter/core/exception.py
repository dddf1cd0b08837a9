class HashIterError(Exception):
    pass


class ConfigurationError(HashIterError):
    pass
