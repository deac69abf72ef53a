"""
Bit-string genome of the genetic algorithm.

The genes of a genome are read in blocks of three bits, every block representing an integer in [0, 7] (i.e. the eyes
of a die, including zero). The fitness of the dice example sums the first two blocks, and so a genome of six bits has
a maximum total of 14.
"""
import uuid

import numpy as np
import typing

from simplega.random_source import RandomSource

BLOCK_SIZE: int = 3
DICE_BLOCKS: int = 2


def decode_block(bits: typing.Sequence[bool]) -> int:
    """Decode a block of bits to an integer: The first bit is the most significant bit.

    :param bits: block of bits
    :type bits: typing.Sequence[bool]

    :return: integer value of block
    :rtype: int
    """
    bits = np.asarray(bits, dtype=int)
    weights = 2 ** np.arange(len(bits))[::-1]
    return int(np.dot(bits, weights))


class Genome:
    """A fixed-length sequence of genes (bits). Genomes are identified by their `id`, not by their genes: Two genomes
    with the same bit pattern are not equal, unless they share the same `id`.
    """

    def __init__(self, gene_size: int) -> None:
        """
        :param gene_size: number of genes (bits)
        :type gene_size: int
        """
        self._genes: np.ndarray = np.zeros(gene_size, dtype=bool)
        self.id: uuid.UUID = uuid.uuid4()

    @classmethod
    def from_string(cls, bit_string: str) -> 'Genome':
        """Create a genome from a string of bits, e.g. '100 001'. Whitespace is ignored, and every character other than
        '0' switches the corresponding gene on.

        :param bit_string: string of bits
        :type bit_string: str

        :return: genome
        :rtype: Genome

        :raises ValueError: if `bit_string` is None or empty
        """
        if not bit_string or not bit_string.strip():
            msg = f'`bit_string` is empty: {bit_string!r}'
            raise ValueError(msg)

        bit_string = ''.join(bit_string.split())

        genome = cls(len(bit_string))
        for i, c in enumerate(bit_string):
            if c != '0':
                genome.set_gene_on(i)

        return genome

    """Genes"""

    @property
    def genes(self) -> typing.Tuple[bool, ...]:
        """
        :return: genes
        :rtype: tuple
        """
        return tuple(self._genes.tolist())

    def __len__(self) -> int:
        return len(self._genes)

    def randomize_gene_values(self, rng: RandomSource) -> None:
        """Randomise all genes: A gene is switched on when a roll in [1, 100] is over 50.

        :param rng: random source
        :type rng: RandomSource
        """
        for i in range(len(self._genes)):
            self._genes[i] = rng.randint(1, 100) > 50

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._genes):
            msg = f'Gene position out of range: {position} not in [0, {len(self._genes)})'
            raise IndexError(msg)

    def set_gene_on(self, gene: int) -> None:
        self._check_position(gene)
        self._genes[gene] = True

    def set_gene_off(self, gene: int) -> None:
        self._check_position(gene)
        self._genes[gene] = False

    def swap_with(self, genome: 'Genome', to_position: int) -> None:
        """Overwrite the genes up to (excluding) `to_position` with those of another genome.

        :param genome: source genome
        :param to_position: end of copied genes (exclusive)

        :type genome: Genome
        :type to_position: int

        :raises IndexError: if `to_position` exceeds either genome's length
        """
        if not 0 <= to_position <= min(len(self), len(genome)):
            msg = f'`to_position` out of range: {to_position} not in [0, {min(len(self), len(genome))}]'
            raise IndexError(msg)

        self._genes[:to_position] = genome._genes[:to_position]

    def swap_genes(self, position_1: int, position_2: int) -> None:
        """Exchange the values of two genes.

        :param position_1: position of first gene
        :param position_2: position of second gene

        :type position_1: int
        :type position_2: int

        :raises IndexError: if either position is out of range
        """
        self._check_position(position_1)
        self._check_position(position_2)
        self._genes[[position_1, position_2]] = self._genes[[position_2, position_1]]

    def clone(self) -> 'Genome':
        """Copy the genes into a new genome. The clone has its own `id`, and so it is not equal to this genome.

        :return: cloned genome
        :rtype: Genome
        """
        genome = self.__class__(len(self._genes))
        genome._genes = self._genes.copy()
        return genome

    """Decoding"""

    def blocks(self) -> typing.List[int]:
        """Decode every block of three genes. A trailing block with fewer genes is decoded from the genes it has.

        :return: block values
        :rtype: list
        """
        return [decode_block(self._genes[i:i + BLOCK_SIZE]) for i in range(0, len(self._genes), BLOCK_SIZE)]

    @property
    def total(self) -> int:
        """Total of the dice example: the sum of the first two blocks. This assumes a genome of six genes; any genes
        beyond the sixth are ignored.

        :return: total
        :rtype: int

        :raises IndexError: if the genome has less than six genes
        """
        n_genes = BLOCK_SIZE * DICE_BLOCKS
        if len(self._genes) < n_genes:
            msg = f'Dice total requires {n_genes} genes: {len(self._genes)} given.'
            raise IndexError(msg)

        return sum(
            decode_block(self._genes[i:i + BLOCK_SIZE]) for i in range(0, n_genes, BLOCK_SIZE)
        )

    @property
    def block_total(self) -> int:
        """
        :return: sum of all blocks
        :rtype: int
        """
        return sum(self.blocks())

    """Comparison & representation"""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        bits = ''.join('1' if g else '0' for g in self._genes.tolist())
        chunks = [bits[i:i + BLOCK_SIZE] for i in range(0, len(bits), BLOCK_SIZE)]
        return f'{" ".join(chunks)} ({",".join(map(str, self.blocks()))})'

    def __repr__(self) -> str:
        bits = ''.join('1' if g else '0' for g in self._genes.tolist())
        return f'{self.__class__.__name__}(id={str(self.id)[:8]}, genes={bits})'
