import io

import pytest

from officeparty.core.errors import ParseFailure, WriteFailure
from officeparty.customers.io import filter_customers, read_customers, sort_by_id, write_customers
from officeparty.domain.models import Customer


class BadWriter(io.StringIO):
    """Accepts `good_writes` lines, then fails like a closed pipe."""

    def __init__(self, good_writes: int = 0) -> None:
        super().__init__()
        self.good_writes = good_writes

    def write(self, s: str) -> int:
        if self.good_writes <= 0:
            raise BrokenPipeError("bad writer write error")
        self.good_writes -= 1
        return super().write(s)


def test_read_customers_empty_input():
    assert read_customers(io.StringIO("")) == []


def test_read_customers_multiple_lines():
    text = (
        '{"latitude": "1.1", "user_id": 1, "name": "Test Case", "longitude": "1.1"}\n'
        '\t\t{"latitude": "1.1", "user_id": 2, "name": "Case Test", "longitude": "1.1"}\r\n'
    )
    assert read_customers(io.StringIO(text)) == [
        Customer(user_id=1, name="Test Case", latitude=1.1, longitude=1.1),
        Customer(user_id=2, name="Case Test", latitude=1.1, longitude=1.1),
    ]


def test_read_customers_fails_whole_batch_on_bad_line():
    text = (
        '{"latitude": "1.1", "user_id": 1, "name": "Test Case", "longitude": "1.1"}\n'
        '{"latitude": "invalid", "user_id": 2, "name": "Test Case", "longitude": "1.1"}\n'
    )
    with pytest.raises(ParseFailure, match="line 2") as info:
        read_customers(io.StringIO(text))
    assert info.value.line_number == 2


def test_read_customers_rejects_blank_lines():
    text = '{"latitude": "1.1", "user_id": 1, "name": "A", "longitude": "1.1"}\n\n'
    with pytest.raises(ParseFailure):
        read_customers(io.StringIO(text))


def test_write_customers_one_line_each():
    out = io.StringIO()
    written = write_customers(out, [Customer(user_id=1, name="Test", latitude=0.0, longitude=0.0)])
    expected = '{"user_id":1,"name":"Test","longitude":"0.0","latitude":"0.0"}\n'
    assert out.getvalue() == expected
    assert written == len(expected)


def test_write_customers_nothing_to_write():
    out = BadWriter()
    assert write_customers(out, []) == 0


def test_write_customers_keeps_partial_output_on_failure():
    out = BadWriter(good_writes=1)
    customers = [
        Customer(user_id=1, name="A", latitude=1.5, longitude=1.5),
        Customer(user_id=2, name="B", latitude=1.5, longitude=1.5),
    ]
    with pytest.raises(WriteFailure) as info:
        write_customers(out, customers)

    assert isinstance(info.value.__cause__, BrokenPipeError)
    assert out.getvalue() == '{"user_id":1,"name":"A","longitude":"1.5","latitude":"1.5"}\n'
    assert info.value.written == len(out.getvalue())


def test_filter_customers_keeps_input_order():
    customers = [Customer(user_id=i, name=str(i), latitude=0.0, longitude=0.0) for i in (4, 1, 3, 2)]
    kept = filter_customers(customers, lambda c: c.user_id % 2 == 0)
    assert [c.user_id for c in kept] == [4, 2]
    assert filter_customers([], lambda c: True) == []


def test_sort_by_id_is_stable_for_duplicates():
    customers = [
        Customer(user_id=3, name="c", latitude=0.0, longitude=0.0),
        Customer(user_id=1, name="first", latitude=0.0, longitude=0.0),
        Customer(user_id=2, name="b", latitude=0.0, longitude=0.0),
        Customer(user_id=1, name="second", latitude=0.0, longitude=0.0),
    ]
    assert [(c.user_id, c.name) for c in sort_by_id(customers)] == [
        (1, "first"),
        (1, "second"),
        (2, "b"),
        (3, "c"),
    ]


class FlushFailWriter(io.StringIO):
    """Buffers writes fine but fails when asked to flush, like a full disk."""

    def flush(self) -> None:
        raise OSError(28, "No space left on device")


def test_write_customers_surfaces_flush_failure():
    out = FlushFailWriter()
    with pytest.raises(WriteFailure, match="No space left") as info:
        write_customers(out, [Customer(user_id=1, name="A", latitude=1.5, longitude=1.5)])
    assert isinstance(info.value.__cause__, OSError)
    assert info.value.written == len(out.getvalue())


def test_read_customers_rejects_invalid_utf8():
    raw = b'{"user_id":1,"name":"\xff","longitude":"1.1","latitude":"1.1"}\n'
    stream = io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8")
    with pytest.raises(ParseFailure, match="UTF-8") as info:
        read_customers(stream)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
