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
"""
Exceptions raised by the kagami codec

All decode failures derive from DecodeError and all encode failures from
EncodeError, so callers can catch the whole family or a specific failure.
Decode errors carry the dotted path of the field where the problem was found;
the path is empty when the problem is with the document as a whole.
"""
from typing import Optional


class KagamiError(Exception):
    pass


class DecodeError(KagamiError):
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path if path is not None else ""
        if self.path:
            message = f"{self.path}: {message}"
        super(DecodeError, self).__init__(message)


class TypeMismatch(DecodeError):
    """
    A wire value's kind disagrees with the declared type of its field
    """
    def __init__(self, field: str, expected: str, actual: str):
        self.field = field
        self.expected = expected
        self.actual = actual
        super(TypeMismatch, self).__init__(f"expected {expected}, got {actual}",
                                           path=field)


class UnionNoMatch(DecodeError):
    """
    None of a union's alternatives accepts the shape of the wire value
    """
    def __init__(self, field: str, union_name: str, actual: str,
                 alternatives: tuple = ()):
        self.field = field
        self.union_name = union_name
        self.actual = actual
        self.alternatives = tuple(alternatives)
        super(UnionNoMatch, self).__init__(f"no alternative of {union_name} "
                                           f"({', '.join(self.alternatives)}) "
                                           f"accepts a {actual}",
                                           path=field)


class DepthExceeded(DecodeError):
    def __init__(self, field: str, max_depth: int):
        self.field = field
        self.max_depth = max_depth
        super(DepthExceeded, self).__init__(f"nesting reaches the maximum decode "
                                            f"depth of {max_depth}",
                                            path=field)


class UnknownFormat(DecodeError):
    """
    The input is neither JSON nor YAML describing a mapping
    """
    pass


class EncodeError(KagamiError):
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path if path is not None else ""
        if self.path:
            message = f"{self.path}: {message}"
        super(EncodeError, self).__init__(message)
