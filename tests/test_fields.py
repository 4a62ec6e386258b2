from pydantic import BaseModel
from notedata import NoteData
from notedata.fields import (
    DESCRIPTION,
    ID,
    IMAGE,
    NAME,
    Operator,
    QueryField,
    model_fields_schema,
)


def test_schema_matches_constants():
    schema = model_fields_schema(NoteData)
    assert list(schema) == ["id", "name", "description", "image"]
    assert schema == {
        "id": ID,
        "name": NAME,
        "description": DESCRIPTION,
        "image": IMAGE,
    }


def test_predicate():
    pred = NAME.eq("milk")
    assert pred.field == "name"
    assert pred.operator == Operator.eq
    assert str(pred) == "name eq 'milk'"


def test_predicate_matches():
    note = NoteData.builder().name("milk").build()
    assert NAME.eq("milk").matches(note)
    assert not NAME.ne("milk").matches(note)
    assert IMAGE.eq(None).matches(note)


def test_query_field_str():
    assert str(QueryField(name="x")) == "x"


def test_schema_fallback():
    class Plain(BaseModel):
        title: str
        body: str | None = None

    assert model_fields_schema(Plain) == {
        "title": QueryField(name="title", required=True),
        "body": QueryField(name="body"),
    }


def test_json_schema_has_no_query_metadata():
    schema = NoteData.model_json_schema()
    assert schema["required"] == ["id"]
    for prop in schema["properties"].values():
        assert "target_type" not in prop
        assert "required" not in prop
