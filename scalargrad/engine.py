import enum
import logging
import math
import numbers

import numpy as np

logger = logging.getLogger(__name__)


class Op(enum.Enum):
    """Operator tag of a derived Value. The enum value is its display symbol."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    NEG = "neg"
    POW = "**"
    EXP = "exp"
    TANH = "tanh"
    RELU = "ReLU"


# --- 1. The Autograd Engine (Scalar) ---
class Value:
    """
    A scalar node in the computation graph.

    Nodes compare and hash by identity, so the same number held by two
    different nodes is still two distinct graph entries.
    """

    def __init__(self, data: float, _op: Op = None, _parents: tuple = (), label: str = None, exponent: int = None):
        self.data = float(data)
        self.grad = 0.0
        self._op = _op
        self._parents = tuple(_parents)
        self.label = label
        self.exponent = exponent

    @property
    def op(self):
        return self._op

    @property
    def parents(self):
        return self._parents

    def set_label(self, label: str):
        self.label = label
        return self

    def __repr__(self):
        if self.label is not None:
            return f"Value(data={self.data:.4f}, grad={self.grad:.4f}, label={self.label!r})"
        return f"Value(data={self.data:.4f}, grad={self.grad:.4f})"

    # --- operators ---
    def __add__(self, other):
        other = _as_value(other)
        return Value(self.data + other.data, Op.ADD, (self, other))

    def __sub__(self, other):
        other = _as_value(other)
        return Value(self.data - other.data, Op.SUB, (self, other))

    def __mul__(self, other):
        other = _as_value(other)
        return Value(self.data * other.data, Op.MUL, (self, other))

    def __neg__(self):
        return Value(-self.data, Op.NEG, (self,))

    def __pow__(self, n):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"only integer exponents are supported, got {type(n).__name__}")
        n = int(n)
        return Value(_ieee(np.power, self.data, float(n)), Op.POW, (self,), exponent=n)

    def exp(self):
        return Value(_ieee(np.exp, self.data), Op.EXP, (self,))

    def tanh(self):
        return Value(math.tanh(self.data), Op.TANH, (self,))

    def relu(self):
        return Value(self.data if self.data > 0 else 0.0, Op.RELU, (self,))

    # Robustness wrappers
    def __radd__(self, other): return _as_value(other) + self
    def __rsub__(self, other): return _as_value(other) - self
    def __rmul__(self, other): return _as_value(other) * self
    def __truediv__(self, other): return self * _as_value(other) ** -1
    def __rtruediv__(self, other): return _as_value(other) * self ** -1

    def backward(self):
        """
        Accumulate d(self)/d(node) into ``grad`` of every ancestor of self.

        Gradients are added, never assigned: calling this twice without
        zeroing first doubles every gradient. Nodes that consume self are
        not part of the walk and keep whatever gradient they had.
        """
        topo = _topological_order(self)
        logger.debug("backward over %d nodes", len(topo))
        # this walk's contributions, kept apart from grads left by earlier walks
        adj = {self: 1.0}
        for node in reversed(topo):
            if node._op is None:
                continue
            local_grads = _LOCAL_GRADS[node._op](node)
            for parent, local in zip(node._parents, local_grads):
                adj[parent] = adj.get(parent, 0.0) + local * adj[node]
        for node in topo:
            node.grad += adj[node]


def _as_value(x):
    if isinstance(x, Value):
        return x
    if isinstance(x, numbers.Real) and not isinstance(x, bool):
        return Value(x)
    raise TypeError(f"unsupported operand type for Value: {type(x).__name__}")


def _ieee(fn, *args):
    # overflow and division by zero give inf/nan instead of raising
    with np.errstate(all="ignore"):
        return float(fn(*args))


def _pow_grad(out):
    n = out.exponent
    return (n * _ieee(np.power, out._parents[0].data, float(n - 1)),)


def _topological_order(root):
    # Post-order DFS over parent links, parents before children. Uses an
    # explicit stack since graph depth can exceed the recursion limit.
    topo = []
    visited = set()
    stack = [(root, False)]
    while stack:
        v, expanded = stack.pop()
        if expanded:
            topo.append(v)
            continue
        if v in visited:
            continue
        visited.add(v)
        stack.append((v, True))
        for parent in reversed(v._parents):
            if parent not in visited:
                stack.append((parent, False))
    return topo


# local derivative of a node w.r.t. each of its parents, in parent order
_LOCAL_GRADS = {
    Op.ADD: lambda out: (1.0, 1.0),
    Op.SUB: lambda out: (1.0, -1.0),
    Op.MUL: lambda out: (out._parents[1].data, out._parents[0].data),
    Op.NEG: lambda out: (-1.0,),
    Op.POW: _pow_grad,
    Op.EXP: lambda out: (out.data,),
    Op.TANH: lambda out: (1.0 - out.data ** 2,),
    Op.RELU: lambda out: (1.0 if out.data > 0 else 0.0,),
}
