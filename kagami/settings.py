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
from typing import Optional, Dict
from threading import current_thread, Thread


# decode depth used when nothing else has been configured
DEFAULT_MAX_DEPTH = 100

_default_max_depth: int = DEFAULT_MAX_DEPTH

_default_max_depth_by_thread: Dict[str, int] = {}


def _check_depth(depth: int):
    if type(depth) is not int:
        raise TypeError("The maximum depth must be an int")
    if depth < 1:
        raise ValueError("The maximum depth must be at least 1")


def get_default_max_depth() -> int:
    """
    Returns the maximum nesting depth used when decoding YAML/JSON

    :return: int; the value set for the current thread with
        set_default_max_depth(). If none was set, the current global default is
        returned.
    """
    ct: Thread = current_thread()
    depth = _default_max_depth_by_thread.get(ct.name)
    if depth is None:
        depth = _default_max_depth
    return depth


def set_default_max_depth(depth: Optional[int]):
    """
    Sets the maximum decode nesting depth for the current thread.

    :param depth: int, at least 1; nested objects at or beyond this depth cause
        decoding to fail with DepthExceeded. None removes the thread's setting
        so the global default applies again.
    :raises TypeError: if depth isn't an int
    :raises ValueError: if depth is less than 1
    """
    ct: Thread = current_thread()
    if depth is None:
        _default_max_depth_by_thread.pop(ct.name, None)
        return
    _check_depth(depth)
    _default_max_depth_by_thread[ct.name] = depth


def set_global_default_max_depth(depth: int):
    """
    Sets the maximum decode nesting depth used by threads with no setting of their own

    :param depth: int, at least 1
    :raises TypeError: if depth isn't an int
    :raises ValueError: if depth is less than 1
    """
    global _default_max_depth
    _check_depth(depth)
    _default_max_depth = depth
