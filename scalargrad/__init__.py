from .engine import Op, Value
from .nn import MLP, InvalidInputShape, Layer, Module, Neuron
from .optim import SGD
from .trace_graph import draw_dot, trace

__all__ = [
    'Op',
    'Value',
    'Module',
    'Neuron',
    'Layer',
    'MLP',
    'InvalidInputShape',
    'SGD',
    'trace',
    'draw_dot',
]
