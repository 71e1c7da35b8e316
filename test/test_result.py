import copy
import pickle
from unittest import TestCase
from json_pointer_engine.pointer import resolve
from json_pointer_engine.result import Ok, Err, ErrorKind, NOT_FOUND, INVALID_SYNTAX
from json_pointer_engine.exception import (
    JsonPointerException,
    InvalidPointerException,
    PointerNotFoundException,
)


class ResultTest(TestCase):

    def test_ok(self):
        result = Ok(None)
        self.assertTrue(result.ok())
        self.assertIsNone(result.unwrap())

    def test_err(self):
        result = Err(ErrorKind.NOT_FOUND, "not found")
        self.assertFalse(result.ok())
        self.assertEqual(result, NOT_FOUND)

    def test_unwrap_not_found(self):
        with self.assertRaises(PointerNotFoundException) as context:
            NOT_FOUND.unwrap()
        self.assertIs(context.exception.error, NOT_FOUND)
        self.assertEqual(str(context.exception), "not found")

    def test_unwrap_syntax(self):
        with self.assertRaises(InvalidPointerException) as context:
            INVALID_SYNTAX.unwrap()
        self.assertEqual(context.exception.error.kind, ErrorKind.SYNTAX)

    def test_common_base(self):
        for error in [NOT_FOUND, INVALID_SYNTAX]:
            with self.assertRaises(JsonPointerException):
                error.unwrap()

    def test_copy(self):
        with self.assertRaises(PointerNotFoundException) as context:
            NOT_FOUND.unwrap()
        duplicate = copy.copy(context.exception)
        self.assertIsInstance(duplicate, PointerNotFoundException)
        self.assertEqual(duplicate.error, NOT_FOUND)
        self.assertEqual(str(duplicate), "not found")

    def test_pickle(self):
        with self.assertRaises(InvalidPointerException) as context:
            INVALID_SYNTAX.unwrap()
        restored = pickle.loads(pickle.dumps(context.exception))
        self.assertIsInstance(restored, InvalidPointerException)
        self.assertEqual(restored.error, INVALID_SYNTAX)
        self.assertEqual(str(restored), "invalid JSON pointer syntax")


class ResolveResultTest(TestCase):

    data = {"foo": {"bar": "baz"}}

    def test_scenarios(self):
        self.assertEqual(resolve(self.data, "/foo/bar"), Ok("baz"))
        self.assertEqual(resolve(self.data, "/foo/qux"), NOT_FOUND)
        self.assertEqual(resolve(self.data, "##foo"), INVALID_SYNTAX)

    def test_root(self):
        for document in [self.data, [], "scalar", None]:
            self.assertEqual(resolve(document, ""), Ok(document))
            self.assertEqual(resolve(document, "#"), Ok(document))

    def test_unwrap(self):
        self.assertEqual(resolve(self.data, "/foo/bar").unwrap(), "baz")
        with self.assertRaises(PointerNotFoundException):
            resolve(self.data, "/foo/qux").unwrap()
