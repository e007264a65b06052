from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from tinyknn.utils.errors import InvalidInputError, SchemaError


@dataclass
class InstanceHeader:
    """Shape of a stream: how many features each instance carries and how many classes exist.

    The class slot is not counted in ``num_features``; it is held separately
    on every :class:`Instance`.
    """
    num_features: int
    num_classes: int
    feature_names: Optional[List[str]] = None
    class_names: Optional[List[str]] = None
    relation: str = "stream"

    def validate(self) -> None:
        """Raise SchemaError if the header cannot describe a stream."""
        if isinstance(self.num_features, bool) or not isinstance(self.num_features, (int, np.integer)):
            raise SchemaError(f"num_features must be an integer, got {self.num_features!r}")
        if self.num_features < 1:
            raise SchemaError(f"num_features must be >= 1, got {self.num_features}")
        if isinstance(self.num_classes, bool) or not isinstance(self.num_classes, (int, np.integer)):
            raise SchemaError(f"num_classes must be an integer, got {self.num_classes!r}")
        if self.num_classes < 1:
            raise SchemaError(f"num_classes must be >= 1, got {self.num_classes}")
        if self.feature_names is not None and len(self.feature_names) != self.num_features:
            raise SchemaError(
                f"Expected {self.num_features} feature names, got {len(self.feature_names)}"
            )
        if self.class_names is not None and len(self.class_names) != self.num_classes:
            raise SchemaError(
                f"Expected {self.num_classes} class names, got {len(self.class_names)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "num_features": int(self.num_features),
            "num_classes": int(self.num_classes),
            "feature_names": list(self.feature_names) if self.feature_names is not None else None,
            "class_names": list(self.class_names) if self.class_names is not None else None,
            "relation": self.relation
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InstanceHeader':
        """Create from dictionary after deserialization."""
        return cls(
            num_features=data.get("num_features"),
            num_classes=data.get("num_classes"),
            feature_names=data.get("feature_names"),
            class_names=data.get("class_names"),
            relation=data.get("relation", "stream")
        )


@dataclass(eq=False)
class Instance:
    """A single labelled (or unlabelled) example of the stream.

    Feature values may be overwritten in place by standardization; the
    instance keeps its identity. Every instance has weight 1.
    """
    features: np.ndarray
    label: Optional[int] = None
    header: Optional[InstanceHeader] = None

    def __post_init__(self):
        features = np.array(self.features, dtype=float)
        if features.ndim != 1:
            raise InvalidInputError(f"Instance features must be one-dimensional, got shape {features.shape}")
        self.features = features
        if self.label is not None:
            try:
                label = int(self.label)
            except (TypeError, ValueError):
                raise InvalidInputError(f"Class label must be a non-negative integer, got {self.label!r}")
            if isinstance(self.label, bool) or label != self.label or label < 0:
                raise InvalidInputError(f"Class label must be a non-negative integer, got {self.label!r}")
            self.label = label

    @property
    def num_features(self) -> int:
        return int(self.features.shape[0])

    @property
    def num_classes(self) -> int:
        return int(self.header.num_classes) if self.header is not None else 0

    @property
    def class_value(self) -> int:
        if self.label is None:
            raise InvalidInputError("Instance has no class label")
        return self.label

    @property
    def weight(self) -> float:
        return 1.0

    def set_features(self, values: Sequence[float]) -> None:
        """Overwrite the feature values in place."""
        values = np.asarray(values, dtype=float)
        if values.shape != self.features.shape:
            raise InvalidInputError(
                f"Cannot replace {self.features.shape[0]} features with {values.shape} values"
            )
        self.features[:] = values

    def copy(self) -> 'Instance':
        return Instance(features=self.features.copy(), label=self.label, header=self.header)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "features": self.features.tolist(),
            "label": self.label
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], header: Optional[InstanceHeader] = None) -> 'Instance':
        """Create from dictionary after deserialization."""
        return cls(
            features=np.array(data["features"], dtype=float),
            label=data.get("label"),
            header=header
        )


@dataclass
class Neighbour:
    """One stored instance returned by a neighbour search, with the searcher's own distance."""
    instance: Instance
    distance: float = field(default=0.0)

    @property
    def class_value(self) -> int:
        return self.instance.class_value
