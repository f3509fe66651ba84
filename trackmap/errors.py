class TrackMapError(Exception):
    """Base class for track map errors"""


class DatasetError(TrackMapError):
    """The track dataset could not be read or is not a FeatureCollection"""


class ConfigurationError(TrackMapError):
    """A TrackMapConfig value cannot be used"""


class MalformedGeometryError(TrackMapError, ValueError):
    """A coordinate has the wrong arity or is not a finite number"""

    def __init__(self, message, feature_index=None):
        if feature_index is not None:
            message = f"Feature {feature_index}: {message}"
        super().__init__(message)
        self.feature_index = feature_index
