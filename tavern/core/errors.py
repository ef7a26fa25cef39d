"""
Exceptions raised by the character and adventure rules and by the
persistence layer.

The combat core itself raises nothing: broken preconditions there are
assertions, and a party wipe is a regular outcome.
"""


class GameException(Exception):
    """Base class for every error the engine reports to its caller."""


# ---- Business rules ----


class BusinessError(GameException):
    """A creation or selection rule was violated."""


class InvalidCharacterNameError(BusinessError):
    def __init__(self) -> None:
        super().__init__("The name must not have any number or special character.")


class CharacterNameAlreadyExistsError(BusinessError):
    def __init__(self) -> None:
        super().__init__("The character's name already exists in the system.")


class InvalidCharacterLevelError(BusinessError):
    def __init__(self) -> None:
        super().__init__("The character level must be between 1 and 10 both included.")


class InvalidCharacterClassError(BusinessError):
    def __init__(self) -> None:
        super().__init__("Not a valid class.")


class NoCharactersFoundError(BusinessError):
    """Raised when a character search comes back empty."""


class AdventureNameAlreadyExistsError(BusinessError):
    def __init__(self) -> None:
        super().__init__("The adventure's name already exists in the system.")


class InvalidEncounterCountError(BusinessError):
    def __init__(self, minimum: int, maximum: int) -> None:
        super().__init__(f"The number of encounters must be between {minimum} and {maximum}.")


class BossAmountExceededError(BusinessError):
    def __init__(self) -> None:
        super().__init__("There is already a Boss in the encounter.")


class BossesToAddExceededError(BusinessError):
    def __init__(self) -> None:
        super().__init__("You can only add one Boss to the encounter.")


class EmptyEncounterError(BusinessError):
    def __init__(self) -> None:
        super().__init__("There are no monsters in the encounter.")


class InsufficientCharactersAmountError(BusinessError):
    def __init__(self, minimum: int) -> None:
        super().__init__(f"The system needs at least {minimum} characters to start an adventure.")


class InvalidPartySizeError(BusinessError):
    def __init__(self, minimum: int, maximum: int) -> None:
        super().__init__(f"A party must have between {minimum} and {maximum} characters.")


class CharacterAlreadyInThePartyError(BusinessError):
    def __init__(self) -> None:
        super().__init__("That character is already in the party!")


class InvalidOptionError(BusinessError):
    def __init__(self) -> None:
        super().__init__("Select a valid option.")


# ---- Persistence ----


class PersistenceError(GameException):
    """The stored data could not be read or written."""


class FileError(PersistenceError):
    """A data file is missing, unreadable or malformed."""


class UnknownCharacterClassError(PersistenceError):
    def __init__(self, class_name: str) -> None:
        super().__init__(f"Unknown character class: {class_name}")
        self.class_name = class_name
