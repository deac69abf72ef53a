"""
Fitness functions, mapping a genome to its fitness score. A higher score represents a fitter genome.
"""
import typing

from simplega.genome import Genome

FitnessFunction = typing.Callable[[Genome], int]


def dice_fitness(genome: Genome) -> int:
    """Fitness of the dice example: sum of the first two blocks of the genome [default]."""
    return genome.total


def block_fitness(genome: Genome) -> int:
    """Fitness as the sum of all blocks of the genome."""
    return genome.block_total


FITNESS_FUNCTIONS: typing.Dict[str, FitnessFunction] = {
    'dice': dice_fitness,
    'blocks': block_fitness,
}


def get_fitness_function(fitness: typing.Union[str, FitnessFunction]) -> FitnessFunction:
    """Get fitness function, either by its name or as a custom callable.

    :param fitness: name of fitness function, or fitness function
    :type fitness: str, callable

    :return: fitness function
    :rtype: callable

    :raises ValueError: if `fitness` is an unknown name
    :raises TypeError: if `fitness` is not callable
    """
    # fitness function by name
    if isinstance(fitness, str):
        if fitness not in FITNESS_FUNCTIONS:
            msg = f'Unknown fitness function: {fitness} not in {tuple(FITNESS_FUNCTIONS)}'
            raise ValueError(msg)
        return FITNESS_FUNCTIONS[fitness]

    # custom fitness function
    if not callable(fitness):
        msg = f'Fitness function must be callable: `fitness` of type {type(fitness)}'
        raise TypeError(msg)
    return fitness
