from __future__ import annotations
import networkx as nx
from typing import Union

from expression import BinaryOp, Constant, Expression, Function, Node, Variable

# Graph view of an expression tree leveraging networkx.MultiDiGraph.
# Graph nodes are keyed by object identity, so a subtree reachable from two
# parents shows up as a node with in-degree 2 instead of being duplicated;
# a multigraph keeps both edges when the same parent holds it twice.

Tree = Union[Expression, Node]

def _root(tree: Tree) -> Node:
	return tree.root if isinstance(tree, Expression) else tree

def _label(node: Node) -> tuple[str, str]:
	if isinstance(node, Constant):
		return 'CONST', str(node.value)
	if isinstance(node, Variable):
		return 'VAR', node.name
	if isinstance(node, BinaryOp):
		return 'OP', node.op.symbol
	if isinstance(node, Function):
		return 'FUNC', node.func.value
	raise TypeError(f"Unknown node {type(node).__name__}")

def _children(node: Node) -> list[Node]:
	if isinstance(node, BinaryOp):
		return [node.left, node.right]
	if isinstance(node, Function):
		return [node.arg]
	return []

def to_digraph(tree: Tree) -> nx.MultiDiGraph:
	root = _root(tree)
	g = nx.MultiDiGraph(root=id(root))
	stack = [root]
	while stack:
		node = stack.pop()
		nid = id(node)
		if nid in g and g.nodes[nid].get('kind') is not None:
			continue
		kind, symbol = _label(node)
		g.add_node(nid, kind=kind, symbol=symbol)
		for idx, child in enumerate(_children(node)):
			g.add_edge(nid, id(child), index=idx)
			stack.append(child)
	return g

def is_tree(tree: Tree) -> bool:
	return nx.is_arborescence(to_digraph(tree))

def node_count(tree: Tree) -> int:
	return to_digraph(tree).number_of_nodes()

def depth(tree: Tree) -> int:
	return nx.dag_longest_path_length(to_digraph(tree))
