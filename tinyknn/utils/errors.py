class TinyKNNError(Exception):
    pass

class ConfigError(TinyKNNError):
    pass

class SchemaError(ConfigError):
    pass

class InvalidInputError(TinyKNNError):
    pass

class SearchError(TinyKNNError):
    pass

class StateError(TinyKNNError):
    pass
