import os
from typing import List

import matplotlib.pyplot as plt

from src.trees.simulation.height_experiment import HeightSample

def plot_samples(samples: List[HeightSample], filepath: str = "data/height_comparison.png") -> str:
    """
    Gera o gráfico de altura x log2(n) para BST, AVL e o limite teórico da AVL.
    Salva a imagem em 'filepath' e retorna o caminho.
    """
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    exponents = [s.exponent for s in samples]

    fig = plt.figure(figsize=(10, 6))
    plt.plot(exponents, [s.bst_height for s in samples], 'r-o', label='BST')
    plt.plot(exponents, [s.avl_height for s in samples], 'b-o', label='AVL')
    plt.plot(exponents, [s.avl_bound for s in samples], 'b--', label='Limite AVL (1.44 log2(n+2) - 0.328)')
    plt.xlabel('log2(n)')
    plt.ylabel('Altura')
    plt.title('Altura da árvore com chaves aleatórias')
    plt.legend()
    plt.grid(True)
    plt.savefig(filepath)
    plt.close(fig)
    return filepath
