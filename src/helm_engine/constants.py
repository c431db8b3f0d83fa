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

import logging
import os
import re

import jsonschema

""" Rendered files """
MANIFEST_SUFFIX = os.environ.get("HELM_ENGINE_MANIFEST_SUFFIX", ".yaml")
# A document separator is a line holding only `---`, optionally followed by a comment
DOCUMENT_SEPARATOR_RE = re.compile(r"^---(?:[ \t]+(?:#[^\n]*)?)?\r?$", re.MULTILINE)
OUTPUT_DOCUMENT_SEPARATOR = "---\n"


""" Kubernetes object fields """
METADATA_KEY = "metadata"
OWNER_REFERENCES_KEY = "ownerReferences"


""" Jsonschema """
OWNER_REFERENCE_JSONSCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "OwnerReference",
    "type": "object",
    "properties": {
        "apiVersion": {"type": "string", "minLength": 1},
        "kind": {"type": "string", "minLength": 1},
        "name": {"type": "string", "minLength": 1},
        "uid": {"type": "string", "minLength": 1},
        "controller": {"type": "boolean"},
        "blockOwnerDeletion": {"type": "boolean"}
    },
    "required": ["apiVersion", "kind", "name", "uid"],
    "additionalProperties": False
}
jsonschema.Draft202012Validator.check_schema(OWNER_REFERENCE_JSONSCHEMA)
OWNER_REFERENCE_VALIDATOR = jsonschema.Draft202012Validator(schema=OWNER_REFERENCE_JSONSCHEMA)


""" Utility """
LOGGING_FORMAT = '%(asctime)s:  %(message)s'
_LOG_LEVEL_NAME = os.environ.get("HELM_ENGINE_LOG_LEVEL", "INFO").upper()
LOG_LEVEL = logging.getLevelName(_LOG_LEVEL_NAME)
if not isinstance(LOG_LEVEL, int):
    raise RuntimeError(f"HELM_ENGINE_LOG_LEVEL is '{_LOG_LEVEL_NAME}', "
                       f"which is not a logging level name")
