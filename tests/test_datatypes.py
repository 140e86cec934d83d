import pytest

from scryptparams.datatypes import ParameterRequest, ResultTriple, encode


def test_encode():
    result = encode(16384, 8, 1)
    assert result == {"N": 16384, "r": 8, "p": 1}
    assert list(result) == ["N", "r", "p"]


def test_result_triple_encode():
    assert ResultTriple(1024, 8, 2).encode() == encode(1024, 8, 2)


def test_result_triple_is_immutable():
    triple = ResultTriple(1024, 8, 2)

    with pytest.raises(AttributeError):
        triple.N = 2048

    assert triple == ResultTriple(1024, 8, 2)
    assert repr(triple) == "ResultTriple(N=1024, r=8, p=2)"


def test_result_triple_range():
    with pytest.raises(ValueError):
        ResultTriple(1024, 1 << 32, 1)

    with pytest.raises(ValueError):
        ResultTriple(1024, 8, -1)


def test_parameter_request_is_always_complete():
    request = ParameterRequest(5)
    assert (request.maxtime, request.maxmemfrac, request.maxmem) == (5.0, 0.5, 0)

    with pytest.raises(ValueError):
        ParameterRequest(0)

    with pytest.raises(ValueError):
        ParameterRequest(5, 0)

    with pytest.raises(ValueError):
        ParameterRequest(5, 0.5, -1)


def test_parameter_request_copy():
    request = ParameterRequest(5, 0.25, 1024)
    other = request.copy()
    assert other == request
    assert other is not request
