"""
Tests for the bit-string genome.
"""
# noinspection PyPackageRequirements
import pytest

from simplega.genome import Genome, decode_block

"""TestObjects"""


class TestGenome:
    """Tests for the `Genome`-object (from `simplega.genome`)."""

    """Initiation"""

    def test_init_all_off(self):
        genome = Genome(6)
        assert genome.genes == (False,) * 6
        assert len(genome) == 6

    def test_from_string(self):
        genome = Genome.from_string('111 011')
        assert genome.genes == (True, True, True, False, True, True)
        assert len(genome) == 6
        assert genome.total == 10

    def test_from_string_whitespace(self):
        genome = Genome.from_string(' 1 01\t010\n')
        assert str(genome) == '101 010 (5,2)'

    def test_from_string_non_zero_characters(self):
        genome = Genome.from_string('2x0')
        assert genome.genes == (True, True, False)

    """Errors: Initiation"""

    def test_error_from_string_empty(self):
        invalid_strings = None, '', '   '
        for s in invalid_strings:
            with pytest.raises(ValueError):
                Genome.from_string(s)

    """Genes"""

    def test_set_gene(self):
        genome = Genome(3)
        genome.set_gene_on(1)
        assert genome.genes == (False, True, False)
        genome.set_gene_off(1)
        assert genome.genes == (False, False, False)

    def test_set_gene_out_of_range(self):
        genome = Genome(3)
        invalid_positions = 3, -1, -4
        for p in invalid_positions:
            with pytest.raises(IndexError):
                genome.set_gene_on(p)
            with pytest.raises(IndexError):
                genome.set_gene_off(p)
        # no gene changed
        assert genome.genes == (False, False, False)

    def test_randomize_gene_values(self, random_stub):
        genome = Genome(6)
        rng = random_stub(51, 50)
        genome.randomize_gene_values(rng)
        # gene is on when roll is over 50
        assert genome.genes == (True, False, True, False, True, False)
        # a single roll in [1, 100] per gene
        assert rng.calls == [(1, 100)] * 6

    def test_swap_with(self):
        genome_1 = Genome.from_string('000 111')
        genome_2 = Genome.from_string('101 000')
        genome_1.swap_with(genome_2, 4)
        assert str(genome_1).startswith('101 011')
        # source genome untouched
        assert str(genome_2).startswith('101 000')

    def test_swap_with_edges(self):
        genome = Genome.from_string('000 000')
        genome.swap_with(Genome.from_string('111 111'), 0)
        assert str(genome).startswith('000 000')
        genome.swap_with(Genome.from_string('111 111'), 6)
        assert str(genome).startswith('111 111')

    def test_swap_with_out_of_range(self):
        genome = Genome.from_string('000 000')
        with pytest.raises(IndexError):
            genome.swap_with(Genome.from_string('111 111 111'), 7)

    def test_swap_genes(self):
        genome = Genome.from_string('000 111')
        genome.swap_genes(0, 5)
        assert str(genome) == '100 110 (4,6)'

    def test_swap_genes_out_of_range(self):
        genome = Genome.from_string('100 000')
        invalid_positions = (0, 6), (0, -1), (-6, 5)
        for p1, p2 in invalid_positions:
            with pytest.raises(IndexError):
                genome.swap_genes(p1, p2)
        # no gene changed
        assert str(genome).startswith('100 000')

    """Clone & equality"""

    def test_clone(self):
        genome = Genome.from_string('110 011')
        clone = genome.clone()
        assert clone.genes == genome.genes
        assert clone != genome
        assert clone.id != genome.id

    def test_clone_independent(self):
        genome = Genome.from_string('110 011')
        clone = genome.clone()
        clone.set_gene_on(2)
        assert genome.genes[2] is False

    def test_equality_by_id(self):
        genome_1 = Genome.from_string('101 101')
        genome_2 = Genome.from_string('101 101')
        assert genome_1 != genome_2
        genome_2.id = genome_1.id
        assert genome_1 == genome_2
        assert len({genome_1, genome_2}) == 1

    """Decoding"""

    def test_decode_block(self):
        assert decode_block([True, True, True]) == 7
        assert decode_block([True, False, False]) == 4
        assert decode_block([False, False, True]) == 1
        assert decode_block([]) == 0

    def test_total(self):
        assert Genome.from_string('111 111').total == 14
        assert Genome.from_string('000 000').total == 0
        assert Genome.from_string('111 010').total == 9

    def test_total_uses_six_genes(self):
        genome = Genome.from_string('111 111 111')
        assert genome.total == 14

    def test_total_too_few_genes(self):
        genome = Genome.from_string('111 11')
        with pytest.raises(IndexError):
            _ = genome.total

    def test_block_total(self):
        assert Genome.from_string('111 111 111').block_total == 21
        assert Genome.from_string('001 010 100').block_total == 7

    def test_blocks(self):
        assert Genome.from_string('111 010').blocks() == [7, 2]
        assert Genome.from_string('1111').blocks() == [7, 1]

    """Representation"""

    def test_str(self):
        genome = Genome(6)
        for i in (0, 1, 2, 4):
            genome.set_gene_on(i)
        assert str(genome) == '111 010 (7,2)'

    def test_str_trailing_block(self):
        assert str(Genome.from_string('11111')) == '111 11 (7,3)'

    def test_str_round_trip(self):
        bit_string = '1 0110 1001 01'
        genome = Genome.from_string(bit_string)
        pattern = str(genome).split(' (')[0]
        assert pattern == '101 101 001 01'

    def test_repr(self):
        genome = Genome.from_string('101')
        assert repr(genome).startswith('Genome(')
        assert 'genes=101' in repr(genome)
