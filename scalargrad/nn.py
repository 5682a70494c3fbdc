from abc import ABC, abstractmethod

import numpy as np

from .engine import Value


class InvalidInputShape(ValueError):
    """Raised when a neuron receives a different number of inputs than it has weights."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"expected {expected} inputs, got {actual}")
        self.expected = expected
        self.actual = actual


class Module(ABC):
    """
    Base class for Neuron, Layer and MLP.

    Subclasses list their learnable leaves in ``parameters()``; ``zero_grad()``
    is shared and resets each of them.
    """

    @abstractmethod
    def parameters(self):
        ...

    @abstractmethod
    def forward(self, x):
        ...

    def zero_grad(self):
        for p in self.parameters():
            p.grad = 0.0

    def __call__(self, x):
        return self.forward(x)


# --- 2. The Neural Network Architecture ---
class Neuron(Module):
    def __init__(self, nin: int, nonlin: bool = True, rng=None):
        # rng: anything with uniform(low, high), e.g. np.random.Generator or random.Random
        rng = rng if rng is not None else np.random.default_rng()
        self.w = [Value(rng.uniform(-1.0, 1.0)) for _ in range(nin)]
        self.b = Value(rng.uniform(-1.0, 1.0))
        self.nonlin = nonlin

    def forward(self, x):
        if len(x) != len(self.w):
            raise InvalidInputShape(len(self.w), len(x))
        act = self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * (xi if isinstance(xi, Value) else Value(xi))
        return act.tanh() if self.nonlin else act

    def parameters(self):
        return self.w + [self.b]

    def __repr__(self):
        return f"{'' if self.nonlin else 'Linear'}Neuron({len(self.w)})"


class Layer(Module):
    def __init__(self, nin: int, nout: int, nonlin: bool = True, rng=None):
        rng = rng if rng is not None else np.random.default_rng()
        self.nin = nin
        self.neurons = [Neuron(nin, nonlin=nonlin, rng=rng) for _ in range(nout)]

    def forward(self, x):
        return [n(x) for n in self.neurons]

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer({self.nin} -> {len(self.neurons)})"


class MLP(Module):
    """Stack of tanh layers: nin -> nouts[0] -> nouts[1] -> ..."""

    def __init__(self, nin: int, nouts: list, rng=None):
        if not nouts:
            raise ValueError("MLP needs at least one layer size")
        rng = rng if rng is not None else np.random.default_rng()
        self.nin = nin
        sz = [nin] + list(nouts)
        self.layers = [Layer(sz[i], sz[i + 1], rng=rng) for i in range(len(nouts))]

    def forward(self, x):
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self):
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        sizes = [len(layer.neurons) for layer in self.layers]
        return f"MLP({self.nin} -> {sizes})"
