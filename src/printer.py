"""Printer helper shared by the demos."""


class Printer:
    """Prints values alongside a stored integer."""

    def __init__(self, value: int):
        self.value = value

    def print_string(self, text: str) -> None:
        """Print the stored value, then the given text."""
        print(self.value)
        print(text)

    def print_int(self, number: int) -> None:
        """Print the number on its own line."""
        print(number)

    def print_bool_pair(self, flag: bool, compare: bool) -> None:
        """Print whether flag is true, then whether it equals compare."""
        if flag:
            print("this is true")
        else:
            print("this is false")

        if flag == compare:
            print("comparing is true")
        else:
            print("comparing is false")
