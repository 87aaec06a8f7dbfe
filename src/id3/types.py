Feature = int
"""Discrete feature code, 0 to MAX_FEATURE_CODE"""

Target = bool
"""Binary target label"""

FeatureValues = dict[str, Feature]
"""Feature name to feature code for a single instance"""

Edge = tuple[str, Feature]
"""(feature name, feature value) label of a branch"""

MAX_FEATURE_CODE: int = 255
"""Largest feature code an encoder may assign"""
