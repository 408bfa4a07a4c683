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
from kagami.meta import (KagamiBase, KagamiDocumentBase, KagamiUnion, DiffDetail,
                         DiffType, FieldMetadata, Time, MicroTime, Quantity,
                         wire_field, unknown_fields_slot)
from kagami.errors import (KagamiError, DecodeError, TypeMismatch, UnionNoMatch,
                           DepthExceeded, UnknownFormat, EncodeError)
from kagami.codec import decode, encode
from kagami.generate import (get_python_source, get_clean_dict, get_yaml, get_json,
                             load_full_yaml, get_processors, from_dict, from_json)
from kagami.naming import process_api_version, camel_to_pep8, pep8_to_camel
from kagami.settings import (get_default_max_depth, set_default_max_depth,
                             set_global_default_max_depth)
from kagami.version_kind import (register_version_kind_class,
                                 get_version_kind_class)
from kagami.crd import get_crd_schema

__version__ = "0.1.0"

__all__ = ["KagamiBase", "KagamiDocumentBase", "KagamiUnion", "DiffDetail", "DiffType",
           "FieldMetadata", "Time", "MicroTime", "Quantity", "wire_field",
           "unknown_fields_slot", "KagamiError", "DecodeError", "TypeMismatch",
           "UnionNoMatch", "DepthExceeded", "UnknownFormat", "EncodeError",
           "decode", "encode", "get_json", "get_yaml", "get_python_source",
           "get_clean_dict", "load_full_yaml", "get_processors", "from_dict",
           "from_json", "process_api_version", "camel_to_pep8", "pep8_to_camel",
           "get_default_max_depth", "set_default_max_depth",
           "set_global_default_max_depth", "register_version_kind_class",
           "get_version_kind_class", "get_crd_schema"]
