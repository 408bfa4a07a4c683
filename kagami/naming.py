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
from typing import Tuple


def process_api_version(api_version: str) -> Tuple[str, str]:
    """
    Takes the value of an apiVersion property and returns group and version

    :param api_version: the value of a apiVersion property
    :return: tuple of two strings: published object group, version. If the
        group is unspecified it defaults to 'core'
    :raises TypeError: if api_version isn't a string
    :raises ValueError: if api_version has more than one '/' or an empty part
    """
    if not isinstance(api_version, str):
        raise TypeError("api_version is not a str")
    parts = api_version.split("/")
    if len(parts) == 1:
        group = "core"
        api_version = parts[0]
    elif len(parts) == 2 and all(parts):
        group, api_version = parts
    else:
        raise ValueError(f"'{api_version}' is not a valid apiVersion")
    return group, api_version


def camel_to_pep8(name: str) -> str:
    """
    Converts a camelcase identifier name a PEP8 param name using underscores
    :param name: string; a possibly camel-cased name
    :return: a PEP8 equivalent with the upper case leter mapped to '_<lower>'

    NOTE: will turn strings like 'FQDN' to '_f_q_d_n'; probably not what you want.
    """
    letters = [a if a.islower() else f"_{a.lower()}"
               for a in name]
    result = ''.join(letters)
    # rare names start with an uppercase letter; put those back without
    # the leading '_'
    if result[0] == "_":
        result = result[1].upper() + result[2:]
    return (result.replace("a_p_i", "api").replace("c_s_i", "csi").
            replace('v_1', 'v1').replace('v_2', 'v2').replace('beta_1', 'beta1').
            replace('beta_2', 'beta2').replace('alpha_1', 'alpha1').
            replace('f_q_d_n', 'fqdn').replace('u_u_i_d', 'uuid').
            replace('c_i_d_r', 'cidr').
            replace('_i_d', '_id').replace('t_l_s', 'tls'))


def pep8_to_camel(name: str) -> str:
    """
    Converts a PEP8 underscore name into the camelcase form Kubernetes uses

    A single trailing underscore (used to dodge Python keywords, as in
    'continue_') is dropped before conversion.

    :param name: string; an underscore-separated name such as 'label_selector'
    :return: the camelcase version, such as 'labelSelector'
    """
    if name.endswith("_") and not name.endswith("__"):
        name = name[:-1]
    first, *rest = name.split("_")
    return first + "".join(p[:1].upper() + p[1:] for p in rest)


def model_module_name(group: str, version: str) -> str:
    """
    Returns the name of the module under kagami.model that holds a group/version

    Only the first label of a dotted group name is used, so
    'apiextensions.k8s.io', 'v1' becomes 'apiextensions_v1'.

    :param group: string; API group as returned by process_api_version()
    :param version: string; API version such as 'v1' or 'v1beta1'
    :return: string; module name, without a package
    """
    return f"{group.split('.')[0]}_{version}"


def make_api_version(group: str, version: str) -> str:
    """
    Inverse of process_api_version(): joins a group and version for apiVersion

    :param group: string; the group; 'core' or an empty string produce a
        bare version
    :param version: string; the version
    :return: the apiVersion string
    """
    if group in ("core", ""):
        return version
    return f"{group}/{version}"
