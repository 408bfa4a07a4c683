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
from threading import Thread

import pytest

from kagami import (decode, get_default_max_depth, set_default_max_depth,
                    set_global_default_max_depth, DepthExceeded)
from kagami.model.apiextensions_v1 import JSONSchemaProps
from kagami.settings import DEFAULT_MAX_DEPTH


def nested_schema(levels: int) -> dict:
    doc = {"type": "object"}
    for _ in range(levels):
        doc = {"not": doc}
    return doc


def run_in_thread(func):
    results = []
    t = Thread(target=lambda: results.append(func()))
    t.start()
    t.join()
    return results[0]


def test01():
    """
    the default depth
    """
    assert DEFAULT_MAX_DEPTH == 100
    assert get_default_max_depth() == DEFAULT_MAX_DEPTH


def test02():
    """
    a thread's setting is used by decode and can be cleared
    """
    set_default_max_depth(3)
    try:
        assert get_default_max_depth() == 3
        _ = decode(nested_schema(2), JSONSchemaProps)
        with pytest.raises(DepthExceeded):
            decode(nested_schema(3), JSONSchemaProps)
        assert decode(nested_schema(3), JSONSchemaProps, max_depth=4) is not None, \
            "an explicit max_depth should win over the thread's setting"
    finally:
        set_default_max_depth(None)
    assert get_default_max_depth() == DEFAULT_MAX_DEPTH


def test03():
    """
    a thread's setting doesn't leak into other threads
    """
    def set_and_get():
        set_default_max_depth(7)
        return get_default_max_depth()

    assert run_in_thread(set_and_get) == 7
    assert get_default_max_depth() == DEFAULT_MAX_DEPTH


def test04():
    """
    the global default applies to threads without a setting of their own
    """
    set_global_default_max_depth(50)
    try:
        assert get_default_max_depth() == 50
        assert run_in_thread(get_default_max_depth) == 50
        set_default_max_depth(8)
        assert get_default_max_depth() == 8
    finally:
        set_default_max_depth(None)
        set_global_default_max_depth(DEFAULT_MAX_DEPTH)
    assert get_default_max_depth() == DEFAULT_MAX_DEPTH


def test05():
    """
    bad depths are refused
    """
    for bad, exc in ((0, ValueError), (-4, ValueError), ("10", TypeError),
                     (True, TypeError), (2.5, TypeError)):
        with pytest.raises(exc):
            set_default_max_depth(bad)
        with pytest.raises(exc):
            set_global_default_max_depth(bad)
    assert get_default_max_depth() == DEFAULT_MAX_DEPTH


if __name__ == "__main__":
    the_tests = {k: v for k, v in globals().items()
                 if k.startswith('test') and callable(v)}
    for k, v in the_tests.items():
        try:
            v()
        except Exception as e:
            print(f'{k} failed with {str(e)}')
