import pytest

from quilldelta.op import UNTIL_END, InsertError, Op, OpType

LINK = {"link": "http://www.example.com"}


def test_deserialize_insert_no_attributes():
    assert Op.from_dict({"insert": "something"}) == Op.insert("something", None)


def test_deserialize_insert_with_attribute():
    op = Op.from_dict({"insert": "something", "attributes": {"key": 1}})
    assert op == Op.insert("something", {"key": 1})


def test_serialize_insert_no_attributes():
    assert Op.insert("something", None).to_dict() == {"insert": "something"}


def test_serialize_retain_with_attributes():
    assert Op.retain(4, {"bold": True}).to_dict() == {
        "retain": 4,
        "attributes": {"bold": True},
    }


def test_serialize_delete():
    assert Op.delete(2).to_dict() == {"delete": 2}


def test_round_trip():
    for op in (Op.insert("a", {"b": True}), Op.retain(3), Op.delete(5), Op.insert(LINK)):
        assert Op.from_dict(op.to_dict()) == op


def test_from_dict_requires_one_kind():
    with pytest.raises(ValueError):
        Op.from_dict({"attributes": {"bold": True}})
    with pytest.raises(ValueError):
        Op.from_dict({"insert": "a", "delete": 1})


def test_insert_string_no_attribute():
    act = Op.insert("something", None)
    assert act.length() == len("something")
    assert act.is_text_insert()
    assert act.is_insert()
    assert not act.is_delete()
    assert not act.is_retain()
    assert act.kind is OpType.INSERT
    assert act.attributes is None


def test_insert_string_with_attributes():
    act = Op.insert("something", {"b": True})
    assert act.is_text_insert()
    assert act.is_insert()
    assert not act.is_delete()
    assert not act.is_retain()
    assert act.kind is OpType.INSERT
    assert act.attributes == {"b": True}


def test_insert_object_no_attribute():
    act = Op.insert(LINK, None)
    assert not act.is_text_insert()
    assert act.is_insert()
    assert not act.is_delete()
    assert not act.is_retain()
    assert act.kind is OpType.INSERT
    assert act.length() == 1
    assert act.value == LINK
    assert act.attributes is None


def test_insert_object_with_attributes_raises():
    with pytest.raises(InsertError):
        Op.insert(LINK, {"b": True})


def test_insert_object_with_empty_attributes_is_allowed():
    act = Op.insert(LINK, {})
    assert act.attributes is None
    assert act.value == LINK


def test_text_on_insert_object_raises():
    with pytest.raises(TypeError):
        Op.insert(LINK, None).text()


def test_text_on_retain_raises():
    with pytest.raises(TypeError):
        Op.retain(10, None).text()


def test_text():
    assert Op.insert("something", None).text() == "something"


def test_value_on_retain_raises():
    with pytest.raises(TypeError):
        Op.retain(10, None).value


def test_value():
    assert Op.insert("something", None).value == "something"


def test_delete():
    act = Op.delete(3)
    assert not act.is_text_insert()
    assert not act.is_insert()
    assert act.is_delete()
    assert not act.is_retain()
    assert act.kind is OpType.DELETE
    assert act.length() == 3
    assert act.attributes is None


def test_retain_no_attribute():
    act = Op.retain(3, None)
    assert not act.is_text_insert()
    assert not act.is_insert()
    assert not act.is_delete()
    assert act.is_retain()
    assert act.kind is OpType.RETAIN
    assert act.length() == 3
    assert act.attributes is None


def test_retain_with_attribute():
    act = Op.retain(3, {"b": True})
    assert act.is_retain()
    assert act.length() == 3
    assert act.attributes == {"b": True}


def test_retain_until_end():
    assert Op.retain_until_end().length() == UNTIL_END


@pytest.mark.parametrize("make", [lambda: Op.retain(0), lambda: Op.delete(0)])
def test_zero_length_raises(make):
    with pytest.raises(ValueError):
        make()


def test_empty_text_insert_is_empty():
    assert Op.insert("").is_empty()
    assert not Op.insert("a").is_empty()


def test_attributes_are_copied():
    attrs = {"bold": True}
    op = Op.insert("a", attrs)
    attrs["italic"] = True
    assert op.attributes == {"bold": True}


def test_str_forms():
    assert str(Op.insert("a\nb")) == "ins(a⏎b)"
    assert str(Op.retain(3)) == "ret(3)"
    assert str(Op.delete(2)) == "del(2)"
    assert str(Op.insert("x", {"bold": True})) == "ins(x) + {bold: true}}"
    assert str(Op.insert({"k": "v"})) == 'ins({"k":"v"})'