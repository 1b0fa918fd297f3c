"""
Experimento de alturas: BST sem balanceamento vs Árvore AVL.
Insere as mesmas chaves aleatórias nas duas árvores até que cada uma tenha
2^i nós e compara as alturas obtidas.
"""
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from src.trees.structures.bst import BinarySearchTree
from src.trees.structures.avl_tree import AVLTree

@dataclass
class ExperimentConfig:
    """Parâmetros do experimento. Tamanhos testados: 2^min_exponent ... 2^max_exponent."""
    min_exponent: int = 1
    max_exponent: int = 20
    max_key: int = 2**31 - 1
    seed: Optional[int] = None
    output_path: str = "data/height_comparison.png"

@dataclass
class HeightSample:
    exponent: int
    size: int
    bst_height: int
    avl_height: int
    avl_bound: float

def avl_height_bound(sizes: Sequence[int]) -> np.ndarray:
    """Limite de pior caso da altura AVL: 1.44 * log2(n + 2) - 0.328."""
    n = np.asarray(sizes, dtype=float)
    return 1.44 * np.log2(n + 2) - 0.328

class HeightExperiment:
    """
    Driver do experimento.
    Gera chaves aleatórias, preenche uma BST e uma AVL com as mesmas chaves
    e registra as alturas para cada tamanho.
    """
    MAX_LOGS = 50

    def __init__(self, config: Optional[ExperimentConfig] = None, verbose: bool = True):
        self.config = config or ExperimentConfig()
        if self.config.min_exponent < 0:
            raise ValueError("O expoente mínimo não pode ser negativo.")
        if self.config.max_exponent < self.config.min_exponent:
            raise ValueError(
                f"Intervalo de expoentes inválido: {self.config.min_exponent}..{self.config.max_exponent}")
        if self.config.max_key < 2**self.config.max_exponent:
            # Sem chaves distintas suficientes o preenchimento nunca terminaria
            raise ValueError(
                f"max_key={self.config.max_key} é pequeno demais para 2^{self.config.max_exponent} chaves distintas.")

        self.verbose = verbose
        self.rng = random.Random(self.config.seed)
        self.logs: List[str] = []

    def fill_trees(self, bst: BinarySearchTree, avl: AVLTree, n: int):
        """
        Insere a mesma chave nas duas árvores até a BST ter n nós.
        Duplicatas sorteadas são ignoradas pelas árvores, então o laço
        continua até completar n chaves distintas.
        """
        while bst.size() < n:
            key = self.rng.randint(1, self.config.max_key)
            bst.insert(key)
            avl.insert(key)

    def run(self) -> List[HeightSample]:
        """Executa o experimento para cada expoente configurado."""
        self.log("Alturas de BSTs sem rebalanceamento e árvores AVL com chaves aleatórias:")
        samples = []
        for exponent in range(self.config.min_exponent, self.config.max_exponent + 1):
            n = 2**exponent
            bst = BinarySearchTree()
            avl = AVLTree()
            self.fill_trees(bst, avl, n)

            sample = HeightSample(
                exponent=exponent,
                size=n,
                bst_height=bst.height(),
                avl_height=avl.height(),
                avl_bound=float(avl_height_bound([n])[0]),
            )
            samples.append(sample)
            self.log(self.format_sample(sample))

            bst.clear()
            avl.clear()
        return samples

    @staticmethod
    def format_sample(sample: HeightSample) -> str:
        return f"2^{sample.exponent:<5d}{sample.bst_height:>4d}{sample.avl_height:>8d}"

    def report(self, samples: List[HeightSample]) -> str:
        """Tabela com o tamanho (2^i), a altura da BST e a altura da AVL."""
        lines = [f"{'n':<7s}{'BST':>4s}{'AVL':>8s}"]
        lines.extend(self.format_sample(sample) for sample in samples)
        return "\n".join(lines)

    def log(self, msg: str):
        if self.verbose:
            print(msg)
        self.logs.append(msg)
        # Mantém apenas as últimas mensagens em memória
        if len(self.logs) > self.MAX_LOGS:
            self.logs.pop(0)

def main():
    from src.trees.simulation.plotting import plot_samples

    experiment = HeightExperiment(verbose=False)
    samples = experiment.run()
    print(experiment.report(samples))

    path = plot_samples(samples, experiment.config.output_path)
    print(f"\n>> Gráfico salvo em '{path}'")

if __name__ == "__main__":
    main()
