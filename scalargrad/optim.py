import logging

logger = logging.getLogger(__name__)


class SGD:
    """Plain gradient descent over a fixed list of leaf Values."""

    def __init__(self, params, lr: float = 0.01):
        if lr <= 0:
            raise ValueError(f"learning rate must be positive, got {lr}")
        self.params = list(params)
        self.lr = lr

    def zero_grad(self):
        for p in self.params:
            p.grad = 0.0

    def step(self):
        logger.debug("sgd step over %d params, lr=%g", len(self.params), self.lr)
        for p in self.params:
            p.data -= self.lr * p.grad
