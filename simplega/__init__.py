"""
SimpleGA is a minimal genetic algorithm evolving bit-string genomes by means of a biased roulette wheel, crossover,
and mutation, until a genome reaches the fitness of a champion.
"""
from simplega.fitness import block_fitness, dice_fitness, get_fitness_function
from simplega.genome import Genome
from simplega.random_source import NumpyRandom, RandomSource, default_random_source
from simplega.world import World

__all__ = [
    'Genome', 'World',
    'dice_fitness', 'block_fitness', 'get_fitness_function',
    'RandomSource', 'NumpyRandom', 'default_random_source',
]

__version__ = '1.0'
__description__ = 'Genetic algorithm evolving bit-string genomes towards a champion'
