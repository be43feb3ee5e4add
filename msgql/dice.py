import random
from typing import List, Optional

from .errors import UserInputError
from .resolver import query
from .utils import gql

type_defs = gql("""
type RandomDie {
    numSides: Int!
    rollOnce: Int!
    roll(numRolls: Int!): [Int]
}

extend type Query {
    hello: String
    quoteOfTheDay: String
    random: Float!
    rollThreeDice: [Int]
    rollDice(numDice: Int!, numSides: Int): [Int]
    getDie(numSides: Int): RandomDie
}
""")

DEFAULT_SIDES = 6
QUOTES = ('Take it easy', 'Salvation lies within')


def check_sides(num_sides: int) -> int:
    if num_sides < 1:
        raise UserInputError(f'a die needs at least one side, got {num_sides}', num_sides=num_sides)
    return num_sides


def roll_die(num_sides: int = DEFAULT_SIDES) -> int:
    return random.randint(1, check_sides(num_sides))


class RandomDie:
    def __init__(self, num_sides: int = DEFAULT_SIDES):
        self.num_sides = check_sides(num_sides)

    def roll_once(self, info) -> int:
        return roll_die(self.num_sides)

    def roll(self, info, num_rolls: int) -> List[int]:
        return [roll_die(self.num_sides) for _ in range(num_rolls)]


@query
def hello(parent, info) -> str:
    return 'Hello World!'


@query
def quote_of_the_day(parent, info) -> str:
    return random.choice(QUOTES)


@query('random')
def random_float(parent, info) -> float:
    return random.random()


@query
def roll_three_dice(parent, info) -> List[int]:
    return [roll_die() for _ in range(3)]


@query
def roll_dice(parent, info, num_dice: int, num_sides: Optional[int] = None) -> List[int]:
    return [roll_die(num_sides or DEFAULT_SIDES) for _ in range(num_dice)]


@query
def get_die(parent, info, num_sides: Optional[int] = None) -> RandomDie:
    return RandomDie(num_sides or DEFAULT_SIDES)
