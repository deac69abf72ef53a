"""
World of genomes: the population and the genetic operations evolving it.

A generation consists of a mutation, a crossover, and the selection of the next generation by means of a biased
roulette wheel. The evolution ends when a champion is born, i.e. a genome with the target fitness.
"""
import logging

import numpy as np
import typing

from simplega.fitness import FitnessFunction, get_fitness_function
from simplega.genome import Genome
from simplega.random_source import RandomSource, default_random_source

_LOG = logging.getLogger(__name__)


class World:
    """A world with a population of genomes, evolving by means of crossover, mutation, and fitness-proportionate
    selection.
    """
    _settings: dict = {
        'champion_fitness': 14,
        'max_generations': None,
    }

    def __init__(
            self, gene_size: int, population_size: int, crossover_chance: int, mutation_chance: int,
            fitness: typing.Union[str, FitnessFunction] = 'dice', rng: RandomSource = None,
            **kwargs
    ) -> None:
        """The population is empty upon initiation; use `.initialize_population()` to populate the world.

        :param gene_size: number of genes in a genome
        :param population_size: number of genomes in the world, should be even
        :param crossover_chance: percentage chance [0, 100] of a crossover between pairs of genomes per generation
        :param mutation_chance: percentage chance [0, 100] of a mutation (two genes being swapped) per generation
        :param fitness: fitness function, or its name {'dice', 'blocks'}, defaults to 'dice'
        :param rng: random source, defaults to None
        :param kwargs: world settings:
            :param champion_fitness: fitness of a champion, defaults to 14
            :param max_generations: maximum number of generations of `.run()`, defaults to None

        :type gene_size: int
        :type population_size: int
        :type crossover_chance: int
        :type mutation_chance: int
        :type fitness: str, callable, optional
        :type rng: RandomSource, optional
        :type kwargs: optional
            :type champion_fitness: int
            :type max_generations: int

        :raises ValueError: if `gene_size` or `population_size` is not positive
        """
        if gene_size < 1 or population_size < 1:
            msg = f'Gene size and population size must be positive: {gene_size=}, {population_size=}'
            raise ValueError(msg)

        self.gene_size = gene_size
        self.population_size = population_size
        self.crossover_chance = self._check_chance('crossover_chance', crossover_chance)
        self.mutation_chance = self._check_chance('mutation_chance', mutation_chance)

        self.fitness_function: FitnessFunction = get_fitness_function(fitness)
        self.rng: RandomSource = rng if rng is not None else default_random_source()

        self._settings = dict(self._settings)
        self._set_settings(kwargs)

        self.population: typing.List[Genome] = []
        self.generation: int = 0

    """Settings"""

    @property
    def settings(self) -> dict:
        """
        :return: world settings
        :rtype: dict
        """
        return self._settings

    def _set_settings(self, settings: dict) -> None:
        """Set and check custom world settings.

        :param settings: custom-defined settings
        :type settings: dict
        """
        for k, v in settings.items():
            if k in self._settings:
                self._settings[k] = v
            else:
                _LOG.warning(f'Unknown setting\'s key: {k} [skipped]')

        self._check_settings(self._settings)

    @staticmethod
    def _check_settings(settings: dict) -> None:
        """Check world settings.

        :param settings: world settings
        :type settings: dict

        :raises ValueError: if `max_generations` is not positive
        """
        max_generations = settings['max_generations']
        if max_generations is not None and max_generations < 1:
            msg = f'`max_generations` must be positive: {max_generations} given.'
            raise ValueError(msg)

    @staticmethod
    def _check_chance(name: str, chance: int) -> int:
        if not 0 <= chance <= 100:
            _LOG.warning(f'`{name}` outside [0, 100]: {chance}')
        return chance

    """Population"""

    def initialize_population(self) -> None:
        """Replace the population by randomised genomes."""
        _LOG.debug(f'Initialising population of {self.population_size} genomes with {self.gene_size} genes')
        population = []
        for _ in range(self.population_size):
            genome = Genome(self.gene_size)
            genome.randomize_gene_values(self.rng)
            population.append(genome)

        self.population = population
        self.generation = 0

    def _ensure_population(self) -> None:
        if not self.population:
            msg = 'The population is empty: Use `initialize_population()` first.'
            raise RuntimeError(msg)

    def fitness(self, genome: Genome) -> int:
        return self.fitness_function(genome)

    def get_champion(self) -> typing.Union[Genome, None]:
        """Find the first genome with the fitness of a champion.

        :return: champion, if any
        :rtype: Genome, None
        """
        for genome in self.population:
            if self.fitness(genome) == self._settings['champion_fitness']:
                return genome
        return None

    def statistics(self) -> dict:
        """Fitness statistics of the population.

        :return: best, worst, mean, and standard deviation of fitness
        :rtype: dict
        """
        self._ensure_population()
        fitness = np.array([self.fitness(g) for g in self.population])
        return {
            'best_fitness': int(fitness.max()),
            'worst_fitness': int(fitness.min()),
            'mean_fitness': float(np.mean(fitness)),
            'std_fitness': float(np.std(fitness)),
        }

    """Selection procedure"""

    def spin_biased_roulette_wheel(self, rng: RandomSource = None) -> Genome:
        """Select a genome with a chance proportional to its fitness. A single roll in [1, 100] is compared with every
        genome's share (in %) of the population's total fitness; the first genome whose share covers the roll is
        selected. Note that a genome without any fitness is selected as soon as it is reached.

        :param rng: random source, defaults to None
        :type rng: RandomSource, optional

        :return: selected genome
        :rtype: Genome

        :raises RuntimeError: if the population is empty
        """
        self._ensure_population()
        rng = rng if rng is not None else self.rng

        fitness = [self.fitness(g) for g in self.population]
        population_total = sum(fitness)

        roll = rng.randint(1, 100)
        for genome, f in zip(self.population, fitness):
            percentage = f / population_total * 100 if population_total else 0.
            if percentage <= 0 or roll <= percentage:
                return genome

        return self.population[0]

    def next_generation(self, rng: RandomSource = None) -> None:
        """Replace the population by a new generation, selecting every genome by the biased roulette wheel.

        :param rng: random source, defaults to None
        :type rng: RandomSource, optional

        :raises RuntimeError: if the population is empty
        """
        self._ensure_population()
        rng = rng if rng is not None else self.rng

        population = [self.spin_biased_roulette_wheel(rng) for _ in range(len(self.population))]
        self.population = population
        self.generation += 1

    """Genetic operations"""

    def cross_over(self, rng: RandomSource = None) -> None:
        """Crossover operation. When the roll succeeds, every pair of genomes is replaced by two children: copies of the
        parents with the genes up to a random position taken from the other parent. An unpaired, trailing genome is
        left untouched.

        :param rng: random source, defaults to None
        :type rng: RandomSource, optional

        :raises RuntimeError: if the population is empty
        """
        self._ensure_population()
        rng = rng if rng is not None else self.rng

        roll = rng.randint(1, 100)
        if self.crossover_chance <= 0 or roll > self.crossover_chance:
            _LOG.debug(f'No crossover performed: roll of {roll}% over the {self.crossover_chance}% threshold.')
            return

        for i in range(0, len(self.population) - 1, 2):
            parent_1, parent_2 = self.population[i], self.population[i + 1]

            position = rng.randint(0, self.gene_size - 1)
            _LOG.debug(f'Crossover of genomes {i} and {i + 1} at position {position}')

            child_1 = parent_1.clone()
            child_2 = parent_2.clone()
            child_1.swap_with(parent_2, position)
            child_2.swap_with(parent_1, position)

            self.population[i], self.population[i + 1] = child_1, child_2

    def mutate(self, rng: RandomSource = None) -> None:
        """Mutation operation. When the roll succeeds, the first genome of every pair swaps two randomly selected genes
        in place.

        :param rng: random source, defaults to None
        :type rng: RandomSource, optional

        :raises RuntimeError: if the population is empty
        """
        self._ensure_population()
        rng = rng if rng is not None else self.rng

        roll = rng.randint(1, 100)
        if self.mutation_chance <= 0 or roll > self.mutation_chance:
            _LOG.debug(f'No mutation performed: roll of {roll}% over the {self.mutation_chance}% threshold.')
            return

        for i in range(0, len(self.population), 2):
            position_1 = rng.randint(0, self.gene_size - 1)
            position_2 = rng.randint(0, self.gene_size - 1)
            _LOG.debug(f'Mutation of genome {i}: swapping genes {position_1} and {position_2}')
            self.population[i].swap_genes(position_1, position_2)

    """Execution"""

    def run(self, max_generations: int = None) -> typing.Tuple[typing.Union[Genome, None], int]:
        """Evolve the world until a champion is born. Every generation consists of a mutation, a crossover, and the
        selection of the next generation. Without a maximum number of generations, the evolution may not terminate.

        :param max_generations: overwrite the maximum number of generations, defaults to None
        :type max_generations: int, optional

        :return: champion (if any), and number of generations
        :rtype: tuple

        :raises ValueError: if `max_generations` is not positive
        """
        if max_generations is None:
            max_generations = self._settings['max_generations']
        elif max_generations < 1:
            msg = f'`max_generations` must be positive: {max_generations} given.'
            raise ValueError(msg)

        if not self.population:
            self.initialize_population()

        generations = 0
        champion = None
        while champion is None:
            if max_generations is not None and generations >= max_generations:
                _LOG.warning(f'No champion born: search halted after {generations} generations.')
                break

            self.mutate()
            self.cross_over()
            self.next_generation()
            generations += 1

            champion = self.get_champion()

        if champion is not None:
            _LOG.info(f'A new leader is born! generation {generations}: {champion}')

        return champion, generations

    def __str__(self) -> str:
        return ''.join(f'{genome}\n' for genome in self.population)
