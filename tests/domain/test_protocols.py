import unittest

from src.nnkit.domain._module import IModule
from src.nnkit.domain._serializable import ISerializable
from src.nnkit.domain._variable import IVariable


class _DuckVariable:
    def __init__(self):
        self.requires_grad = True
        self.grad = None

    def zero_grad(self):
        self.grad = None


class _DuckModule:
    def forward(self, x):
        return x

    def parameters(self):
        return []

    def train(self):
        pass

    def eval(self):
        pass

    def pretty_string(self):
        return "Duck"


class TestDomainProtocols(unittest.TestCase):

    def test_structural_variable(self):
        self.assertIsInstance(_DuckVariable(), IVariable)
        self.assertNotIsInstance(object(), IVariable)

    def test_structural_module(self):
        self.assertIsInstance(_DuckModule(), IModule)
        self.assertNotIsInstance(_DuckModule(), ISerializable)


if __name__ == "__main__":
    unittest.main()
