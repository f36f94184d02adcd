from json_schema_to_go.pipeline.analyzer import FieldDef, StructDef, TypeRef, TypeRegistry


def body(*keys):
    return StructDef(fields=[FieldDef(name=k.upper(), json_name=k, type_ref=TypeRef.primitive("string")) for k in keys])


class TestTypeRegistry:
    def test_entries_sorted_by_name(self):
        registry = TypeRegistry()
        for name in ["JsonZeta", "JsonAlpha", "JsonMid"]:
            registry.register(name, body("x"))

        assert [name for name, _ in registry.entries()] == ["JsonAlpha", "JsonMid", "JsonZeta"]

    def test_first_registration_wins(self):
        registry = TypeRegistry()

        assert registry.register("JsonFoo", body("a")) is True
        assert registry.register("JsonFoo", body("b")) is False
        assert registry.get("JsonFoo") == body("a")
        assert len(registry) == 1

    def test_empty(self):
        registry = TypeRegistry()

        assert registry.entries() == []
        assert "JsonFoo" not in registry
        assert registry.get("JsonFoo") is None
