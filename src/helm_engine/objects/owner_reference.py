# Copyright 2023 Petuum, Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License."

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

import kubernetes_asyncio as kubernetes

from ..constants import OWNER_REFERENCE_VALIDATOR
from ..utils.classes import ValidationError


@dataclass(frozen=True)
class OwnerReference:
    """
    Reference to the object that owns the rendered resources.

    Kubernetes garbage collects an object once all of its owners are gone, so
    every resource of a release carries the references given to the engine.
    """
    api_version: str
    kind: str
    name: str
    uid: str
    controller: Optional[bool] = None
    block_owner_deletion: Optional[bool] = None

    @classmethod
    def from_dict(cls, data):
        """Build from the camelCase mapping used in manifests. Raises `ValidationError`."""
        errors = _schema_errors(data)
        if errors:
            raise ValidationError(errors)
        return cls(api_version=data["apiVersion"],
                   kind=data["kind"],
                   name=data["name"],
                   uid=data["uid"],
                   controller=data.get("controller"),
                   block_owner_deletion=data.get("blockOwnerDeletion"))

    @classmethod
    def controller_reference(cls, obj):
        """
        Reference making `obj` (a kubernetes object as a mapping) the managing
        controller of the rendered resources.
        """
        metadata = obj.get("metadata") or {}
        return cls.from_dict({"apiVersion": obj.get("apiVersion"),
                              "kind": obj.get("kind"),
                              "name": metadata.get("name"),
                              "uid": metadata.get("uid"),
                              "controller": True,
                              "blockOwnerDeletion": True})

    def to_dict(self):
        result = {"apiVersion": self.api_version,
                  "kind": self.kind,
                  "name": self.name,
                  "uid": self.uid}
        if self.controller is not None:
            result["controller"] = self.controller
        if self.block_owner_deletion is not None:
            result["blockOwnerDeletion"] = self.block_owner_deletion
        return result


def _schema_errors(data):
    return {f"owner reference {_describe(data)}: {error.message}"
            for error in OWNER_REFERENCE_VALIDATOR.iter_errors(data)}


def _describe(data):
    if isinstance(data, Mapping):
        return f"{data.get('kind')}/{data.get('name')}"
    return repr(data)


def _model_to_dict(model):
    # same conversion as ApiClient.sanitize_for_serialization, without needing a client
    return {model.attribute_map[attr]: getattr(model, attr)
            for attr in model.openapi_types
            if getattr(model, attr) is not None}


def normalize_owner_references(owner_references):
    """
    Turn a sequence of owner references into a tuple of `OwnerReference`.

    Items may be `OwnerReference` instances, camelCase mappings or
    `kubernetes_asyncio.client.V1OwnerReference` models. Raises a
    `ValidationError` listing every invalid item.
    """
    if isinstance(owner_references, (str, bytes, Mapping)):
        raise ValidationError({"owner references must be a sequence of references, "
                               f"got {type(owner_references).__name__}"})
    result = []
    errors = set()
    for reference in owner_references:
        if isinstance(reference, OwnerReference):
            data = reference.to_dict()
        elif isinstance(reference, kubernetes.client.V1OwnerReference):
            data = _model_to_dict(reference)
        else:
            data = reference
        try:
            result.append(OwnerReference.from_dict(data))
        except ValidationError as e:
            errors = errors.union(e.errors)

    if errors:
        raise ValidationError(errors)

    return tuple(result)
