from string import ascii_uppercase


class SymbolTable:
    """Fixed table of 26 integer slots, one per uppercase letter. Slots start at 0 and are only ever overwritten."""

    def __init__(self):
        self.slots = [0] * len(ascii_uppercase)

    @staticmethod
    def index(name):
        assert len(name) == 1 and name in ascii_uppercase, f"'{name}' is not a variable name"
        return ord(name) - ord("A")

    def __getitem__(self, name):
        return self.slots[SymbolTable.index(name)]

    def __setitem__(self, name, value):
        self.slots[SymbolTable.index(name)] = value

    def items(self):
        return zip(ascii_uppercase, self.slots)

    def reset(self):
        self.slots = [0] * len(ascii_uppercase)

    def __repr__(self):
        assigned = ", ".join(f"{name}={value}" for name, value in self.items() if value)
        return f"SymbolTable({assigned})"
