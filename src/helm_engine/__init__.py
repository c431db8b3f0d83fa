# Copyright 2023 Petuum, Inc. All Rights Reserved.

from .engine import OwnerRefEngine, RenderEngine, new_owner_ref_engine
from .manifests import add_owner_refs, split_manifests
from .objects.owner_reference import OwnerReference, normalize_owner_references
from .utils.classes import InjectionError, ManifestConversionError, ManifestParseError, \
    ManifestSerializationError, ValidationError

__all__ = ["OwnerRefEngine", "RenderEngine", "new_owner_ref_engine",
           "add_owner_refs", "split_manifests",
           "OwnerReference", "normalize_owner_references",
           "InjectionError", "ManifestConversionError", "ManifestParseError",
           "ManifestSerializationError", "ValidationError"]
