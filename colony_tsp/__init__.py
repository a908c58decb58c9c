from .tsp import TSPInstance, City, distance_matrix, tour_length
from .errors import ACOError, InvalidInputError, ConfigurationError
from .pheromone import PheromoneField
from .colony import ACOConfig, ACOResult, AntSystem
from .api import optimize, optimize_matrix
from .experiments import run_parameter_sweep, run_repeated_trials
