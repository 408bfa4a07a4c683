#
# Copyright (c) 2021 Incisive Technology Ltd
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
import pytest

from kagami.naming import (process_api_version, camel_to_pep8, pep8_to_camel,
                           model_module_name, make_api_version)


def test01():
    """
    splitting apiVersion values
    """
    assert process_api_version("v1") == ("core", "v1")
    assert process_api_version("apps/v1") == ("apps", "v1")
    assert process_api_version("resource.k8s.io/v1beta1") == ("resource.k8s.io", "v1beta1")
    with pytest.raises(TypeError):
        process_api_version(None)


def test02():
    """
    joining them back up
    """
    assert make_api_version("core", "v1") == "v1"
    assert make_api_version("", "v1") == "v1"
    assert make_api_version("coordination.k8s.io", "v1") == "coordination.k8s.io/v1"


def test03():
    """
    model modules are named for the first label of the group
    """
    assert model_module_name("apiextensions.k8s.io", "v1") == "apiextensions_v1"
    assert model_module_name("core", "v1") == "core_v1"
    assert model_module_name("resource.k8s.io", "v1beta1") == "resource_v1beta1"


def test04():
    """
    camel case to PEP8 and back
    """
    assert camel_to_pep8("podDisruptionBudget") == "pod_disruption_budget"
    assert camel_to_pep8("customResourceDefinition") == "custom_resource_definition"
    assert camel_to_pep8("apiVersion") == "api_version"
    assert pep8_to_camel("label_selector") == "labelSelector"
    assert pep8_to_camel("continue_") == "continue"
    assert pep8_to_camel("watch") == "watch"
    assert pep8_to_camel("resource_version_match") == "resourceVersionMatch"


def test05():
    """
    malformed apiVersion values are rejected clearly
    """
    for bad in ("a/b/c", "apps/", "/v1"):
        with pytest.raises(ValueError) as ei:
            process_api_version(bad)
        assert bad in str(ei.value), str(ei.value)
