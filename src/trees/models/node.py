import weakref
from typing import Optional

class TreeNode:
    """
    Nó de uma árvore binária de busca.
    Armazena a chave, a altura em cache e as ligações com pai e filhos.
    O pai é guardado como referência fraca: quem é dono dos nós é a árvore,
    através dos filhos a partir da raiz.
    """
    def __init__(self, key):
        self.key = key
        self.height = 0         # Folha recém-criada tem altura 0
        self.left: Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None
        self._parent = None     # weakref.ref para o pai (ou None)

    @property
    def parent(self) -> Optional["TreeNode"]:
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional["TreeNode"]):
        self._parent = weakref.ref(node) if node is not None else None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self):
        return f"TreeNode(key={self.key!r}, height={self.height})"


def height(node: Optional[TreeNode]) -> int:
    """Altura em cache do nó. Nó ausente tem altura -1."""
    if node is None:
        return -1
    return node.height

def update_height(node: TreeNode):
    """
    Recalcula a altura do nó a partir das alturas (já corretas) dos filhos.
    Complexidade: O(1)
    """
    node.height = 1 + max(height(node.left), height(node.right))

def balance_factor(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return height(node.left) - height(node.right)

def compute_height(node: Optional[TreeNode]) -> int:
    """
    Calcula a altura do zero, sem usar o cache.
    Usa pilha explícita (pós-ordem) para não estourar o limite de recursão
    em árvores degeneradas.
    """
    if node is None:
        return -1

    heights = {}
    stack = [(node, False)]
    while stack:
        current, children_done = stack.pop()
        if children_done:
            left = heights.pop(id(current.left), -1) if current.left else -1
            right = heights.pop(id(current.right), -1) if current.right else -1
            heights[id(current)] = 1 + max(left, right)
            continue

        stack.append((current, True))
        if current.right is not None:
            stack.append((current.right, False))
        if current.left is not None:
            stack.append((current.left, False))

    return heights[id(node)]
