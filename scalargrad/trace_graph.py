import logging

from graphviz import Digraph

logger = logging.getLogger(__name__)


# --- 3. Visualization Tools (Graphviz) ---
def trace(root):
    """Collect every node reachable from root through parent links, plus the edges between them."""
    nodes, edges = set(), set()
    stack = [root]
    while stack:
        v = stack.pop()
        if v in nodes:
            continue
        nodes.add(v)
        for parent in v.parents:
            edges.add((parent, v))
            stack.append(parent)
    return nodes, edges


def draw_dot(root, format='svg', rankdir='LR'):
    """
    Build a Graphviz digraph of the computation that produced root.

    Each value is a record node showing its label, data and grad; each
    derived value also gets a small operator node feeding into it. The
    returned Digraph is not rendered: call ``.render()`` (requires the
    Graphviz binaries) or read ``.source``.
    """
    dot = Digraph(format=format, graph_attr={'rankdir': rankdir})

    nodes, edges = trace(root)
    logger.debug("drawing %d nodes, %d edges", len(nodes), len(edges))
    for n in nodes:
        uid = str(id(n))
        name = n.label if n.label is not None else ''
        dot.node(name=uid, label="{ %s | data %.4f | grad %.4f }" % (name, n.data, n.grad), shape='record')

        if n.op is not None:
            dot.node(name=uid + n.op.name, label=n.op.value)
            dot.edge(uid + n.op.name, uid)

    for n1, n2 in edges:
        dot.edge(str(id(n1)), str(id(n2)) + n2.op.name)

    return dot
