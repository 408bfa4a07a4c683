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
import importlib
import pytest
from kagami import (KagamiBase, KagamiDocumentBase, KagamiUnion, get_clean_dict,
                    from_dict, get_version_kind_class)
from kagami.model import model_modules


all_classes = []
for modname in model_modules:
    mod = importlib.import_module(f"kagami.model.{modname}")
    for o in vars(mod).values():
        if (type(o) is type and issubclass(o, KagamiBase) and
                o.__module__ == mod.__name__):
            all_classes.append(o)

all_documents = [c for c in all_classes if issubclass(c, KagamiDocumentBase)]

all_unions = []
for modname in model_modules:
    mod = importlib.import_module(f"kagami.model.{modname}")
    all_unions.extend(o for o in vars(mod).values()
                      if (type(o) is type and issubclass(o, KagamiUnion) and
                          o.__module__ == mod.__name__))


@pytest.mark.parametrize('cls', all_classes)
def test_instantiation(cls):
    assert issubclass(cls, KagamiBase)
    inst = cls.get_empty_instance()
    d = get_clean_dict(inst)
    if issubclass(cls, KagamiDocumentBase):
        again = from_dict(d)
    else:
        again = from_dict(d, cls=cls)
    assert again == inst, f"{cls.__name__} didn't survive a round trip"


@pytest.mark.parametrize('cls', all_documents)
def test_registered(cls):
    inst = cls.get_empty_instance()
    assert get_version_kind_class(inst.apiVersion, inst.kind) is cls, \
        f"{inst.apiVersion}/{inst.kind} isn't registered to {cls.__name__}"


@pytest.mark.parametrize('cls', all_unions)
def test_union_empty(cls):
    inst = cls()
    assert inst.arm is None
    assert inst.value is None
    assert len(cls.alternatives()) >= 2, f"{cls.__name__} has too few alternatives"


if __name__ == "__main__":
    for cls in all_classes:
        test_instantiation(cls)
        print('.', end="")
    print()
