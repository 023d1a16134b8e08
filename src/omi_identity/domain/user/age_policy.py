"""Age rule applied by the use-cases, not by the User entity."""

from omi_identity.domain.user.exceptions import InvalidAgeError

MIN_AGE = 13
MAX_AGE = 120


def validate_age(age: int) -> None:
    if age < MIN_AGE or age > MAX_AGE:
        raise InvalidAgeError(age, MIN_AGE, MAX_AGE)
