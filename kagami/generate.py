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
import json
from io import StringIO
from typing import List, TextIO, Optional, Union

from ruamel.yaml import YAML

from kagami.codec import encode, decode, decode_object, parse_text, yaml_parser
from kagami.errors import UnknownFormat, DepthExceeded
from kagami.settings import get_default_max_depth
from kagami.meta import KagamiBase, KagamiDocumentBase
from kagami.version_kind import get_version_kind_class


def get_python_source(obj: KagamiBase, assign_to: str = None,
                      style: Optional[str] = None) -> str:
    """
    returns Python source that will re-create the supplied object

    NOTE: this function can be slow, as formatting the code to be PEP8 compliant
    can take some time for complex code.

    :param obj: an instance of KagamiBase
    :param assign_to: if supplied, must be a legal Python identifier name,
        as the returned expression will be assigned to that as a variable.
    :param style: optional string, default None, may also be one of 'black'
        or 'autopep8'. This argument indicates what code formatter, if any,
        to apply. The default value of None says not to format the code; this
        will return syntactically correct Python, but all on one line. The
        'black' style produces vertically spread-out code that is a bit clearer
        to read; 'autopep8' puts more arguments on each line, so it's a bit more
        compact.
    :return: Python source code that will re-create the supplied object
    :raises RuntimeError: if an unrecognized style is supplied
    """
    if style not in ('black', 'autopep8', None):
        raise RuntimeError(f'Unrecognized style: {style}')
    code = obj.as_python_source(assign_to=assign_to)
    if style is None:
        result = code
    elif style == "autopep8":
        from autopep8 import fix_code
        result = fix_code(code, options={"max_line_length": 88,
                                         "experimental": 1})
    else:  # then it's black
        from black import format_str, Mode, NothingChanged
        try:
            result = format_str(code, mode=Mode())
        except NothingChanged:
            result = code
    return result


def get_clean_dict(obj: KagamiBase, sort_keys: bool = False) -> dict:
    """
    Turns an instance of a KagamiBase into a dict in wire form

    This function returns a Python dict object that represents the hierarchy
    of objects starting at ``obj`` and recursing into any nested objects.
    The returned dict **does not** include any key/value pairs for fields that
    are unset (None); fields set to empty containers or zero values are kept,
    as those are meaningful to the API server. Keys are the wire keys, so a
    field declared as ``dollar_ref`` appears as '$ref'.

    :param obj: some subclass of KagamiBase
    :param sort_keys: optional bool, default False; if True keys are sorted at
        every level, otherwise they're in field declaration order
    :return: a dict representation of the obj instance, only containing the
        fields that are set
    :raises TypeError: if obj is not an instance of a KagamiBase subclass
    :raises EncodeError: if a field holds a value that doesn't fit its type
    """
    if not isinstance(obj, KagamiBase):
        raise TypeError("obj must be a kind of KagamiBase")
    return encode(obj, sort_keys=sort_keys)


def get_yaml(obj: KagamiBase, sort_keys: bool = False) -> str:
    """
    Creates a YAML representation of a KagamiBase model

    :param obj: instance of some KagamiBase subclass
    :param sort_keys: optional bool, default False; if True keys are sorted at
        every level
    :return: big ol' string of YAML that represents the model
    :raises TypeError: if the supplied obj is not an instance of a KagamiBase
        subclass
    """
    if not isinstance(obj, KagamiBase):
        raise TypeError("obj must be a kind of KagamiBase")
    d: dict = get_clean_dict(obj, sort_keys=sort_keys)
    yaml = YAML(typ="safe")
    yaml.sort_base_mapping_type_on_output = sort_keys
    yaml.default_flow_style = False
    yaml.indent(offset=2, sequence=4)
    sio = StringIO()
    yaml.dump(d, sio)
    return "\n".join(["---", sio.getvalue()])


def get_json(obj: KagamiBase, sort_keys: bool = False) -> str:
    """
    Creates a JSON representation of a KagamiBase model

    :param obj: instance of a KagamiBase model
    :param sort_keys: optional bool, default False; if True keys are sorted at
        every level
    :return: string containing JSON that represents the information in the model
    :raises TypeError: if obj is not an instance of a KagamiBase subclass
    """
    if not isinstance(obj, KagamiBase):
        raise TypeError("obj must be an instance of a KagamiBase subclass")
    d = get_clean_dict(obj)
    s = json.dumps(d, sort_keys=sort_keys)
    return s


def _class_for_doc(doc: dict, doc_number: int = 0) -> type:
    api_version = doc.get('apiVersion', '')
    kind = doc.get('kind', '')
    klass = (get_version_kind_class(api_version, kind)
             if isinstance(api_version, str) and isinstance(kind, str) else None)
    if klass is None:
        raise RuntimeError(f"Doc number {doc_number} in the supplied YAML has an"
                           f" unrecognized apiVersion ({api_version}) and"
                           f" kind ({kind}) pair; can't determine the class"
                           f" to instantiate")
    return klass


def from_json(json_data: Union[str, bytes], cls: Optional[type] = None,
              max_depth: Optional[int] = None) -> KagamiBase:
    """
    Create kagami objects from a string of JSON, such as from ``get_json()``

    If the JSON is a full Kubernetes document, such as a Pod or Deployment,
    only the json_data argument is required; the class is found from its
    apiVersion and kind.

    If the JSON is for an arbitrary KagamiBase subclass, this function needs to
    know what kind of thing it is loading; in this case, you must provide the
    ``cls`` parameter.

    :param json_data: string or bytes of JSON
    :param cls: optional; a KagamiBase subclass (*not* the string name
        of the class). This should match the kind of object the JSON describes.
    :param max_depth: optional int; maximum nesting depth. Defaults to
        kagami.settings.get_default_max_depth().
    :return: an instance of a KagamiBase subclass with all attributes and contained
        objects recreated.
    :raises UnknownFormat: if json_data isn't JSON describing an object
    :raises DepthExceeded: if the JSON nests deeper than max_depth
    """
    if cls is not None:
        return decode(json_data, cls, max_depth=max_depth)
    d = parse_text(json_data, max_depth=max_depth)
    if not isinstance(d, dict):
        raise UnknownFormat("json_data does not describe an object")
    return from_dict(d, max_depth=max_depth)


def from_dict(adict: dict, cls: Optional[type] = None,
              max_depth: Optional[int] = None) -> KagamiBase:
    """
    Create kagami objects from a ``get_clean_dict()`` dict

    This function can re-create a hierarchy of KagamiBase objects from a
    dict that was created with ``get_clean_dict()``, or from any dict produced
    by a JSON or YAML parser.

    If the dict was created from a full Kubernetes document object, such as Pod
    or Deployment, only the dict argument is required.

    If the dict was created from an arbitrary KagamiBase subclass, this function
    needs to know what kind of thing it is loading; in this case, you must provide
    the ``cls`` parameter.

    :param adict: a Python dict in wire form
    :param cls: optional; a KagamiBase subclass (*not* the string name
        of the class). This should match the kind of object that was dumped into
        the dict.
    :param max_depth: optional int; maximum nesting depth. Defaults to
        kagami.settings.get_default_max_depth().
    :return: an instance of a KagamiBase subclass with all attributes and contained
        objects recreated.
    :raises RuntimeError: if no cls was specified and kagami was unable to determine
        what class to make from the data
    :raises TypeError: if adict isn't actually a dict, or if cls isn't a subclass
        (not an instance) of KagamiBase
    :raises DecodeError: (or a subclass) if the data doesn't fit the class
    """
    if not isinstance(adict, dict):
        raise TypeError("The 'adict' parameter is not a dict")
    if cls is not None and not (isinstance(cls, type) and issubclass(cls, KagamiBase)):
        raise TypeError("cls is not a subclass of KagamiBase")
    if cls is None:
        cls = _class_for_doc(adict)
    return decode_object(cls, adict, max_depth=max_depth)


def get_processors(path: str = None, stream: TextIO = None,
                   yaml: str = None, max_depth: Optional[int] = None) -> List[dict]:
    """
    Takes a path, stream, or string for a YAML file and returns a list of processors.

    This function can accept a number of different parameters that can provide
    the contents of a YAML file; from this, a YAML parser is created and a processed
    list of YAML dicts is created and returned. The main use case for this function is to
    provide input to the from_yaml() method of a KagamiBase subclass.

    Only one of path, stream or yaml should be supplied. If yaml is supplied in addition
    to path or stream, only the yaml parameter is used. If stream and path are supplied,
    then only stream is used.

    :param path: string; path to a Kubernetes YAML file containing one or more docs
    :param stream: file-like object; opened on a Kubernetes YAML file containing one
        or more documents
    :param yaml: string; contains Kubernetes YAML, one or more documents
    :param max_depth: optional int; only used to report a DepthExceeded if the
        YAML nests too deeply to parse
    :return: List of dicts that contain the parsed-out content of the input YAML
        files. Empty documents are skipped.
    :raises RuntimeError: if none of path, stream or yaml are provided.
    :raises DepthExceeded: if the YAML nests too deeply to parse
    """
    if path is None and stream is None and yaml is None:
        raise RuntimeError("One of path, stream, or yaml must be specified")
    if yaml:
        to_parse = yaml
    elif stream:
        to_parse = stream.read()
    else:
        with open(path, "r") as f:
            to_parse = f.read()
    parser = yaml_parser()
    try:
        docs = [d for d in parser.load_all(to_parse) if d is not None]
    except RecursionError:
        raise DepthExceeded("", max_depth if max_depth is not None
                            else get_default_max_depth())
    return docs


def load_full_yaml(path: str = None, stream: TextIO = None,
                   yaml: str = None,
                   max_depth: Optional[int] = None) -> List[KagamiDocumentBase]:
    """
    Parse/process the indicated Kubernetes yaml file and return a list of kagami objects

    This function takes one of the supplied sources of Kubernetes YAML, parses it
    into separate YAML documents, and then processes those into a list of kagami
    objects, one per document.

    **NOTE**: this function only works on complete Kubernetes message documents,
    and relies on the presence of both 'apiVersion' and 'kind' being in the top-level
    object. Other Kubernetes objects can be decoded using either the appropriate
    class's from_yaml() class method or kagami.decode().

    Only one of path, stream or yaml should be supplied. If yaml is supplied in addition
    to path or stream, only the yaml parameter is used. If stream and path are supplied,
    then only stream is used.

    :param path: string; path to a yaml file that will be opened, read, and processed
    :param stream: return of the open() function, or any file-like (TextIO) object
    :param yaml: string; the actual YAML to process
    :param max_depth: optional int; maximum nesting depth for each document.
        Defaults to kagami.settings.get_default_max_depth().
    :return: list of KagamiDocumentBase subclasses, one for each document in the YAML file
    :raises RuntimeError: if one of the documents in the input YAML has an unrecognized
        apiVersion/kind pair; kagami can't determine what class to instantiate, or
        if none of the YAML input sources have been specified.
    """
    docs = get_processors(path=path, stream=stream, yaml=yaml, max_depth=max_depth)
    objs = []
    for i, doc in enumerate(docs):
        if not isinstance(doc, dict):
            raise RuntimeError(f"Doc number {i} in the supplied YAML is not a mapping")
        klass = _class_for_doc(doc, i)
        objs.append(decode_object(klass, doc, max_depth=max_depth))
    return objs
