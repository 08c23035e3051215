from unittest import TestCase

from ..settings import Settings


class TestSettings(TestCase):
    def setUp(self):
        self.test_key = "database.url"
        self.test_value = "postgresql://localhost/issuer"
        self.test_instance = Settings({self.test_key: self.test_value})

    def test_settings_init(self):
        """Test settings initialization."""
        assert self.test_key in self.test_instance
        assert self.test_instance[self.test_key] == self.test_value
        assert self.test_instance.get("log.level") is None
        assert dict(self.test_instance) == {self.test_key: self.test_value}
        assert len(Settings()) == 0
        with self.assertRaises(KeyError):
            self.test_instance["MISSING"]

    def test_get_value(self):
        """Test retrieval of name alternatives."""
        assert (
            self.test_instance.get_value("database.dsn", self.test_key)
            == self.test_value
        )
        assert self.test_instance.get_value("missing", default=1) == 1

    def test_get_str(self):
        settings = Settings({"schema.type": 5})
        assert settings.get_str("schema.type") == "5"
        assert settings.get_str("schema.url") is None
        assert settings.get_str("schema.url", default="x") == "x"

    def test_get_list(self):
        """Test list retrieval."""
        assert self.test_instance.get_list("schema.attributes") is None
        assert self.test_instance.get_list(self.test_key) == [self.test_value]
        settings = Settings({"schema.attributes": ({"name": "age", "value": "1"},)})
        assert settings.get_list("schema.attributes") == [
            {"name": "age", "value": "1"}
        ]
