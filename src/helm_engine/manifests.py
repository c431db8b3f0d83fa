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

import datetime
import math

import yaml

from .constants import DOCUMENT_SEPARATOR_RE, METADATA_KEY, OUTPUT_DOCUMENT_SEPARATOR, \
    OWNER_REFERENCES_KEY
from .utils.classes import ManifestConversionError, ManifestParseError, \
    ManifestSerializationError
from .utils.yaml_utils import dump_manifest, load_manifest


def _only_directives(piece):
    lines = [line.strip() for line in piece.splitlines()]
    lines = [line for line in lines if line and not line.startswith("#")]
    return bool(lines) and all(line.startswith("%") for line in lines)


def split_manifests(file_contents):
    """
    Split the contents of a rendered file into its documents, in order.

    Only lines made of `---` (plus optional whitespace or a comment) separate
    documents. Empty documents are kept here and dropped after parsing.
    Directives such as `%YAML 1.1` stay attached to the document they precede.
    """
    documents = []
    directives = ""
    for piece in DOCUMENT_SEPARATOR_RE.split(file_contents):
        if _only_directives(piece):
            directives += piece
            continue
        if directives:
            piece = f"{directives}---{piece}"
            directives = ""
        documents.append(piece)
    if directives:
        # directives with no document after them, left for the parser to reject
        documents.append(directives)
    return documents


def _key_to_str(key):
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    if isinstance(key, (int, float)):
        return str(key)
    raise ManifestConversionError({f"unsupported mapping key {key!r}"})


def to_unstructured(obj, path="", parents=frozenset()):
    """
    Convert a parsed document into plain dicts, lists and scalars with string
    keys, the shape of a kubernetes object read from JSON.

    `parents` holds the ids of the containers enclosing `obj`; an anchor
    aliased inside itself is reported instead of recursing forever.
    """
    if isinstance(obj, (dict, list)):
        if id(obj) in parents:
            raise ManifestConversionError({f"value at {path or '.'} refers to itself"})
        parents = parents | {id(obj)}
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            key = _key_to_str(key)
            result[key] = to_unstructured(value, f"{path}.{key}", parents)
        return result
    if isinstance(obj, list):
        return [to_unstructured(value, f"{path}[{index}]", parents)
                for index, value in enumerate(obj)]
    if obj is None or isinstance(obj, (str, bool, int)):
        return obj
    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise ManifestConversionError(
                {f"value at {path or '.'} is not representable in JSON: {obj}"})
        return obj
    if isinstance(obj, (datetime.date, datetime.datetime)):
        return obj.isoformat()
    raise ManifestConversionError(
        {f"value at {path or '.'} has unsupported type {type(obj).__name__}"})


def set_owner_references(obj, owner_references):
    """Replace `metadata.ownerReferences` of `obj` in place, creating `metadata` if needed."""
    metadata = obj.get(METADATA_KEY)
    if metadata is None:
        metadata = obj[METADATA_KEY] = {}
    elif not isinstance(metadata, dict):
        raise ManifestConversionError(
            {f"metadata must be a mapping, got {type(metadata).__name__}"})
    metadata[OWNER_REFERENCES_KEY] = [reference.to_dict() for reference in owner_references]
    return obj


def add_owner_refs(file_contents, owner_references, file_name=None):
    """
    Add `owner_references` to every document of a rendered file.

    args:
        file_contents (str): rendered file, possibly holding several documents
        owner_references (sequence of OwnerReference): references to set
        file_name (str | None): used in error messages only

    returns:
        the re-serialized documents joined by `---`, or "" if the file holds
        no non-empty document
    raises:
        ManifestParseError, ManifestConversionError, ManifestSerializationError
    """
    documents = []
    for document in split_manifests(file_contents):
        try:
            parsed = load_manifest(document)
        except yaml.YAMLError as e:
            raise ManifestParseError({str(e)}, file_name) from e

        if parsed is None or parsed == {}:
            # blank templates and stray separators
            continue
        if not isinstance(parsed, dict):
            raise ManifestConversionError(
                {f"expected a mapping at the top of the document, "
                 f"got {type(parsed).__name__}"}, file_name)

        try:
            unstructured = to_unstructured(parsed)
            set_owner_references(unstructured, owner_references)
        except ManifestConversionError as e:
            e.file_name = file_name
            raise

        try:
            documents.append(dump_manifest(unstructured))
        except yaml.YAMLError as e:
            raise ManifestSerializationError({str(e)}, file_name) from e

    return OUTPUT_DOCUMENT_SEPARATOR.join(documents)
