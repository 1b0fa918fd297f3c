from typing import Any, Iterator, List, Optional
from src.trees.models.node import TreeNode, height, update_height

class TreeInvariantError(Exception):
    """Levantada por check_invariants() quando a árvore está inconsistente."""
    pass

class BinarySearchTree:
    """
    Árvore Binária de Busca sem balanceamento.
    - Inserção iterativa, sem chaves duplicadas (duplicata é ignorada).
    - Não há remoção.
    - A altura de cada nó fica em cache e é atualizada só nos ancestrais
      do nó inserido: O(profundidade) por inserção.
    """
    def __init__(self):
        self.root: Optional[TreeNode] = None
        self._size = 0

    def insert(self, key: Any) -> Optional[TreeNode]:
        """
        Insere a chave como nova folha.
        Retorna o nó criado, ou None se a chave já existia.
        """
        if self.root is None:
            self.root = TreeNode(key)
            self._size = 1
            return self.root

        current = self.root
        while True:
            if key == current.key:
                # Duplicata: nada muda
                return None

            if key <= current.key:
                if current.left is None:
                    new_node = TreeNode(key)
                    current.left = new_node
                    break
                current = current.left
            else:
                if current.right is None:
                    new_node = TreeNode(key)
                    current.right = new_node
                    break
                current = current.right

        new_node.parent = current
        self._size += 1
        self._update_ancestor_heights(new_node)
        return new_node

    def search(self, key: Any) -> Optional[TreeNode]:
        """Busca iterativa. Retorna o nó com a chave ou None."""
        current = self.root
        while current:
            if key == current.key:
                return current
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def height(self) -> int:
        """Altura da árvore (-1 se vazia)."""
        return height(self.root)

    def size(self) -> int:
        return self._size

    def keys(self) -> List[Any]:
        """Retorna todas as chaves em ordem crescente."""
        return list(self)

    def clear(self) -> int:
        """
        Desmonta a árvore liberando cada nó exatamente uma vez (pós-ordem
        iterativa). Retorna quantos nós foram liberados.
        """
        released = 0
        for node in self._iter_postorder():
            node.left = None
            node.right = None
            node.parent = None
            released += 1

        self.root = None
        self._size = 0
        return released

    def _update_ancestor_heights(self, node: Optional[TreeNode]):
        """
        Sobe pelos pais recalculando a altura de cada ancestral a partir das
        alturas dos filhos, até passar da raiz.
        """
        while node is not None:
            update_height(node)
            node = node.parent

    def _iter_postorder(self) -> Iterator[TreeNode]:
        # Os dois filhos são lidos antes de o nó ser entregue, então o
        # consumidor pode desligar o nó recebido sem afetar o percurso.
        if self.root is None:
            return
        stack = [(self.root, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def check_invariants(self):
        """
        Verifica a árvore inteira:
        1. Percurso em ordem estritamente crescente (propriedade de BST).
        2. Ligações pai/filho consistentes.
        3. Altura em cache igual à altura recalculada do zero.
        4. size() igual ao número de nós.
        """
        if self.root is not None and self.root.parent is not None:
            raise TreeInvariantError("A raiz não pode ter pai.")

        previous = None
        count = 0
        for node in self._iter_inorder():
            if count and not previous.key < node.key:
                raise TreeInvariantError(
                    f"Ordem violada: {previous.key!r} aparece antes de {node.key!r}")
            for child in (node.left, node.right):
                if child is not None and child.parent is not node:
                    raise TreeInvariantError(
                        f"Filho {child.key!r} não aponta para o pai {node.key!r}")
            previous = node
            count += 1

        computed = {}
        for node in self._iter_postorder():
            left = computed[id(node.left)] if node.left else -1
            right = computed[id(node.right)] if node.right else -1
            computed[id(node)] = 1 + max(left, right)
            if node.height != computed[id(node)]:
                raise TreeInvariantError(
                    f"Altura em cache de {node.key!r} é {node.height}, "
                    f"esperado {computed[id(node)]}")

        if count != self._size:
            raise TreeInvariantError(f"size()={self._size}, mas a árvore tem {count} nós")

    def _iter_inorder(self) -> Iterator[TreeNode]:
        stack = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def __iter__(self) -> Iterator[Any]:
        """Percurso em ordem (lazy). Cada chamada começa do início."""
        return (node.key for node in self._iter_inorder())

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __len__(self) -> int:
        return self._size

    def __str__(self):
        return ", ".join(str(key) for key in self)

    def __repr__(self):
        return f"{type(self).__name__}(size={self._size}, height={self.height()})"
