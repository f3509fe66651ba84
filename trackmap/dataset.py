import json
from pathlib import Path

from trackmap.errors import DatasetError
from trackmap.logging_config import get_logger

logger = get_logger(__name__)


def load_feature_collection(path):
    """
    Load a GeoJSON-like FeatureCollection of track segments.

    Args:
        path: Path to a UTF-8 JSON file with a top-level ``features`` list

    Returns:
        The parsed collection as a dict

    Raises:
        DatasetError: if the file is missing or unreadable, is not valid
            UTF-8 JSON, or does not
            hold a list of feature objects
    """
    path = Path(path)
    if not path.exists():
        raise DatasetError(f"Track dataset not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise DatasetError(f"Track dataset {path} could not be read: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Track dataset {path} is not valid JSON: {e}") from e

    validate_feature_collection(data)
    logger.info(f"Loaded {len(data['features'])} track features from {path}")
    return data


def validate_feature_collection(data):
    """Check the outer FeatureCollection structure; geometries are checked on reprojection."""
    if not isinstance(data, dict):
        raise DatasetError("Track dataset must be a JSON object")

    features = data.get("features")
    if not isinstance(features, list):
        raise DatasetError("Track dataset has no 'features' list")

    for i, feature in enumerate(features):
        if not isinstance(feature, dict):
            raise DatasetError(f"Feature {i} is not an object")
        properties = feature.get("properties")
        if properties is not None and not isinstance(properties, dict):
            raise DatasetError(f"Feature {i} has non-object properties")
