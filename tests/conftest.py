import pytest

from xrefstore.errors import ResourceReadError

ICC_BYTES = b"\x00\x00\x00\x84fake-icc-profile\xff\x00"


class DictResourceReader:
    def __init__(self, files):
        self.files = files
        self.reads = []

    def read(self, name):
        self.reads.append(name)
        try:
            return self.files[name]
        except KeyError:
            raise ResourceReadError(name, "not found") from None


class RecordingFormatter:
    def __init__(self, output=b"<x:xmpmeta/>"):
        self.output = output
        self.calls = []

    def __call__(self, info, enable_pdfa_1b):
        self.calls.append((info, enable_pdfa_1b))
        return self.output


@pytest.fixture
def icc_reader():
    return DictResourceReader({"sRGB.icc": ICC_BYTES})


@pytest.fixture
def missing_reader():
    return DictResourceReader({})


@pytest.fixture
def formatter():
    return RecordingFormatter()
