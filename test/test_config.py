from unittest import TestCase
from json_pointer_engine.config import ResolveConfig
from json_pointer_engine.pointer import resolve, resolve_while, Continue
from json_pointer_engine.result import Ok, ErrorKind


class ResolveConfigTest(TestCase):

    data = {"a": {"b": {"c": [1, 2]}}}

    def test_unbounded(self):
        config = ResolveConfig()
        self.assertTrue(config.allows(1000))
        self.assertEqual(resolve(self.data, "/a/b/c/1", config=config), Ok(2))

    def test_within_limit(self):
        config = ResolveConfig(max_depth=4)
        self.assertEqual(resolve(self.data, "/a/b/c/1", config=config), Ok(2))
        self.assertEqual(resolve(self.data, "", config=config), Ok(self.data))

    def test_exceeds_limit(self):
        config = ResolveConfig(max_depth=3)
        result = resolve(self.data, "/a/b/c/1", config=config)
        self.assertEqual(result.kind, ErrorKind.SYNTAX)
        self.assertEqual(result.message, "JSON pointer exceeds maximum depth")
        result = resolve(self.data, "#/a/b/c/1", config=config)
        self.assertEqual(result.kind, ErrorKind.SYNTAX)

    def test_resolve_while(self):
        def step(value, token, context):
            return Continue(value, context[1] + 1)
        config = ResolveConfig(max_depth=2)
        self.assertEqual(resolve_while(self.data, "/a/b", 0, step, config=config), Ok(({"c": [1, 2]}, 2)))
        self.assertEqual(resolve_while(self.data, "/a/b/c", 0, step, config=config).kind, ErrorKind.SYNTAX)

    def test_relative(self):
        config = ResolveConfig(max_depth=3)
        self.assertEqual(resolve(self.data, "/a/b/c", "1/c/0", config=config), Ok(1))
        self.assertEqual(resolve(self.data, "/a/b/c/0", "0", config=config).kind, ErrorKind.SYNTAX)
        self.assertEqual(resolve(self.data, "/a", "1/a/b/c/0", config=config).kind, ErrorKind.SYNTAX)
