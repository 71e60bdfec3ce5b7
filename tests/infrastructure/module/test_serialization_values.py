import json
import unittest

import numpy as np

from src.nnkit.domain._errors import SerializationError
from src.nnkit.infrastructure._variable import Variable
from src.nnkit.infrastructure.module._serialization_values import (
    array_to_payload,
    decode_value,
    encode_value,
    payload_to_array,
)


def _through_json(value):
    return decode_value(json.loads(json.dumps(encode_value(value))))


class TestArrayPayload(unittest.TestCase):

    def test_payload_keeps_dtype_and_shape(self):
        arr = np.arange(12, dtype=np.int16).reshape(3, 4)
        payload = array_to_payload(arr)
        self.assertEqual(payload["shape"], [3, 4])
        self.assertEqual(payload["order"], "C")

        out = payload_to_array(payload)
        self.assertEqual(out.dtype, np.int16)
        np.testing.assert_array_equal(out, arr)
        self.assertTrue(out.flags.writeable)

    def test_non_contiguous_input(self):
        arr = np.arange(6, dtype=np.float32).reshape(2, 3).T
        np.testing.assert_array_equal(payload_to_array(array_to_payload(arr)), arr)

    def test_malformed_payload_raises(self):
        payload = array_to_payload(np.zeros((2,), dtype=np.float32))
        payload["shape"] = [3]
        with self.assertRaises(SerializationError):
            payload_to_array(payload)
        with self.assertRaises(SerializationError):
            payload_to_array({"dtype": "<f4", "shape": [1]})

    def test_object_arrays_rejected(self):
        with self.assertRaises(SerializationError):
            array_to_payload(np.array([object()], dtype=object))


class TestValueCodec(unittest.TestCase):

    def test_scalars_pass_through(self):
        for value in (None, True, False, 3, 2.5, "relu"):
            self.assertEqual(_through_json(value), value)
        self.assertIs(_through_json(True), True)

    def test_numpy_scalars_become_python_scalars(self):
        self.assertEqual(encode_value(np.float32(1.5)), 1.5)
        self.assertEqual(encode_value(np.int64(7)), 7)

    def test_variable_keeps_value_and_tracking_flag(self):
        v = Variable(np.array([[1.0, 2.0]], dtype=np.float32), requires_grad=False)
        v.set_grad(Variable(np.ones((1, 2), dtype=np.float32)))

        out = _through_json(v)
        self.assertIsInstance(out, Variable)
        self.assertFalse(out.requires_grad)
        self.assertIsNone(out.grad)
        self.assertEqual(out.dtype, np.float32)
        np.testing.assert_array_equal(out.to_numpy(), v.to_numpy())

    def test_containers_keep_their_type(self):
        value = {"sizes": (3, 4), "names": ["a", "b"], "arr": np.eye(2)}
        out = _through_json(value)
        self.assertEqual(out["sizes"], (3, 4))
        self.assertIsInstance(out["sizes"], tuple)
        self.assertEqual(out["names"], ["a", "b"])
        np.testing.assert_array_equal(out["arr"], np.eye(2))

    def test_non_str_dict_keys_rejected(self):
        with self.assertRaises(SerializationError):
            encode_value({1: "a"})

    def test_malformed_nodes_raise_serialization_error(self):
        bad_nodes = [
            {"kind": "variable"},
            {"kind": "variable", "array": [1, 2]},
            {
                "kind": "variable",
                "array": array_to_payload(np.zeros(1)),
                "requires_grad": "no",
            },
            {"kind": "ndarray"},
            {"kind": "list"},
            {"kind": "tuple", "items": 5},
            {"kind": "dict", "items": [1]},
            {"kind": "list", "items": [{"kind": "dict"}]},
        ]
        for node in bad_nodes:
            with self.assertRaises(SerializationError, msg=repr(node)):
                decode_value(node)

    def test_unknown_objects_rejected(self):
        with self.assertRaises(SerializationError):
            encode_value(object())
        with self.assertRaises(SerializationError):
            decode_value({"kind": "mystery"})
        with self.assertRaises(SerializationError):
            decode_value([1, 2])


if __name__ == "__main__":
    unittest.main()
