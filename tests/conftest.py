import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeToken:
    def __init__(self, surface, part_of_speech):
        self.surface = surface
        self.part_of_speech = part_of_speech


class FakeTokenizer:
    """空白で区切り、辞書にある語はその品詞、それ以外は記号として返す"""

    def __init__(self, pos_by_surface=None, fail_on=None):
        self.pos_by_surface = pos_by_surface or {}
        self.fail_on = fail_on

    def tokenize(self, text):
        if self.fail_on is not None and self.fail_on in text:
            raise RuntimeError("broken lattice")
        for surface in text.split():
            pos = self.pos_by_surface.get(surface, "記号,一般,*,*")
            yield FakeToken(surface, pos)


@pytest.fixture
def noun_tokenizer():
    def build(*nouns, **kwargs):
        return FakeTokenizer({n: "名詞,一般,*,*,*,*,{},*,*".format(n) for n in nouns}, **kwargs)
    return build
