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
import logging

import pytest

from src.helm_engine.objects.owner_reference import OwnerReference
from src.helm_engine.utils.classes import InjectionError, ManifestParseError, RenderPhase, \
    ValidationError
from src.helm_engine.utils.logger import EngineLogger
from src.helm_engine.utils.yaml_utils import dump_manifest, load_manifest
from tests.helpers.constants import CONTROLLER_REFERENCE, OWNER_REFERENCE


def test_validation_error():
    error = ValidationError({"second problem", "first problem"})

    assert str(error) == ("The following errors occured during validation:\n"
                          "first problem\n\nsecond problem\n\n")
    errors = error.errors
    errors.add("third problem")
    assert len(error.errors) == 2


def test_injection_error():
    error = ManifestParseError({"mapping values are not allowed here"})

    assert isinstance(error, InjectionError)
    assert error.file_name is None
    assert str(error) == \
        "error parsing rendered template to add ownerrefs: mapping values are not allowed here"

    error.file_name = "templates/svc.yaml"
    assert str(error) == ("error parsing rendered template to add ownerrefs to "
                          "templates/svc.yaml: mapping values are not allowed here")


@pytest.mark.parametrize("owner_references,extra,expected", [
    ((), {}, 'owners=None phase=None : message="hello"'),
    ((OwnerReference.from_dict(OWNER_REFERENCE),), {"phase": RenderPhase.INJECTION},
     'owners=MyApp/instance1 phase=Injection : message="hello"'),
    ((OwnerReference.from_dict(OWNER_REFERENCE), OwnerReference.from_dict(CONTROLLER_REFERENCE)),
     {"phase": RenderPhase.INJECTION},
     'owners=MyApp/instance1,Release/release-a phase=Injection : message="hello"'),
])
def test_engine_logger(owner_references, extra, expected):
    logger = EngineLogger(logging.getLogger(__name__), {"owner_references": owner_references})
    kwargs = {"extra": extra} if extra else {}

    msg, _ = logger.process("hello", kwargs)

    assert msg == expected


def test_load_manifest_keeps_timestamps():
    loaded = load_manifest("created: 2020-01-01\nexplicit: !!timestamp 2020-01-01\n")
    assert loaded == {"created": "2020-01-01", "explicit": datetime.date(2020, 1, 1)}


def test_dump_manifest():
    shared = {"name": "x"}
    obj = {"kind": "ConfigMap",
           "data": {"script": "line one\nline two\n", "long": "a" * 200},
           "apiVersion": "v1",
           "items": [shared, shared]}

    dumped = dump_manifest(obj)

    assert dumped.startswith("apiVersion: v1\ndata:\n")
    assert "  script: |\n    line one\n    line two\n" in dumped
    assert f"  long: {'a' * 200}\n" in dumped
    assert "&" not in dumped
    assert dumped.endswith("items:\n- name: x\n- name: x\nkind: ConfigMap\n")
    assert load_manifest(dumped) == obj
