from typing import Any, Optional
from src.trees.models.node import TreeNode, balance_factor, height, update_height
from src.trees.structures.bst import BinarySearchTree, TreeInvariantError

class AVLTree(BinarySearchTree):
    """
    Árvore AVL: uma BST que se rebalanceia a cada inserção.
    Em todo nó, as alturas das duas subárvores diferem no máximo em 1.
    Garante altura O(log n) e inserção/busca em O(log n).
    """
    def __init__(self):
        super().__init__()
        self.rotation_count = 0   # Reestruturações feitas nesta árvore

    def insert(self, key: Any) -> Optional[TreeNode]:
        """Insere como uma BST comum e depois rebalanceia a partir do novo nó."""
        # 1. Inserção normal de BST (já atualiza as alturas dos ancestrais)
        new_node = super().insert(key)
        if new_node is None:
            return None

        # 2. Sobe a partir do nó inserido procurando o ancestral desbalanceado
        # mais próximo
        current = new_node
        while current is not None:
            if self._is_unbalanced(current):
                z = current
                parent = z.parent
                y = self._taller_child(z, prefer_left=True)
                x = self._taller_child(y, prefer_left=y is z.left)

                # 3. Reestruturação trinode e religação no lugar de z
                subtree_root = self._restructure(x, y, z)
                self._replace_child(parent, z, subtree_root)

                # 4. A altura da subárvore pode ter mudado: corrige os ancestrais
                self._update_ancestor_heights(subtree_root)
                self.rotation_count += 1

                # Continua a varredura acima da nova raiz da subárvore
                current = subtree_root
            current = current.parent

        return new_node

    # --- Métodos Auxiliares e Rotações ---

    def _is_unbalanced(self, node: TreeNode) -> bool:
        return abs(balance_factor(node)) > 1

    def _taller_child(self, node: TreeNode, prefer_left: bool) -> TreeNode:
        """
        Filho do lado mais alto. Em caso de empate vence o filho "alinhado"
        com a direção z -> y, o que escolhe rotação simples em vez de dupla.
        """
        left_height = height(node.left)
        right_height = height(node.right)
        if left_height > right_height:
            return node.left
        if right_height > left_height:
            return node.right
        return node.left if prefer_left else node.right

    def _restructure(self, x: TreeNode, y: TreeNode, z: TreeNode) -> TreeNode:
        """
        Reestruturação trinode. z é o ancestral desbalanceado, y o filho mais
        alto de z e x o filho mais alto de y. Os três nós são renomeados como
        a < b < c (ordem das chaves) e as quatro subárvores externas como
        t0..t3 (ordem em-ordem). Retorna b, a nova raiz da subárvore.

        Caso 1 - Esquerda-Esquerda (rotação simples à direita)
               z                y
              / \\             /   \\
             y   t3    ==>    x     z
            / \\             / \\   / \\
           x   t2          t0 t1 t2  t3
          / \\
         t0  t1

        Caso 2 - Esquerda-Direita (rotação dupla)
             z                   x
            / \\               /   \\
           y   t3     ==>     y     z
          / \\               / \\   / \\
         t0  x             t0 t1 t2  t3
            / \\
           t1  t2

        Casos 3 e 4 são os espelhos (Direita-Direita e Direita-Esquerda).
        """
        if x.key < y.key:
            if y.key < z.key:
                # Caso 1 - Esquerda-Esquerda
                a, b, c = x, y, z
                t0, t1, t2, t3 = x.left, x.right, y.right, z.right
            else:
                # Caso 4 - Direita-Esquerda (z < x < y)
                a, b, c = z, x, y
                t0, t1, t2, t3 = z.left, x.left, x.right, y.right
        else:
            if y.key > z.key:
                # Caso 3 - Direita-Direita
                a, b, c = z, y, x
                t0, t1, t2, t3 = z.left, y.left, x.left, x.right
            else:
                # Caso 2 - Esquerda-Direita (y < x < z)
                a, b, c = y, x, z
                t0, t1, t2, t3 = y.left, x.left, x.right, z.right

        self._link(a, t0, t1)
        self._link(c, t2, t3)
        self._link(b, a, c)

        # As subárvores t0..t3 não mudaram por dentro: basta recalcular os
        # três nós, de baixo para cima
        update_height(a)
        update_height(c)
        update_height(b)
        return b

    def _link(self, node: TreeNode, left: Optional[TreeNode], right: Optional[TreeNode]):
        node.left = left
        node.right = right
        if left is not None:
            left.parent = node
        if right is not None:
            right.parent = node

    def _replace_child(self, parent: Optional[TreeNode], old: TreeNode, new: TreeNode):
        """Coloca a nova raiz da subárvore na posição que era de 'old'."""
        if parent is None:
            self.root = new
            new.parent = None
            return

        if parent.left is old:
            parent.left = new
        else:
            parent.right = new
        new.parent = parent

    def check_invariants(self):
        """Verificações da BST mais o fator de balanceamento de cada nó."""
        super().check_invariants()
        for node in self._iter_inorder():
            if self._is_unbalanced(node):
                raise TreeInvariantError(
                    f"Nó {node.key!r} desbalanceado (fator {balance_factor(node)})")
