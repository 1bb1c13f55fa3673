from .poly import Poly


class PolyStack:
    def __init__(self, polys=None):
        self.polys = []
        for poly in polys or ():
            self.push(poly)


    def push(self, poly):
        assert isinstance(poly, Poly)
        self.polys.append(poly)


    def pop(self):
        if not self.polys:
            raise IndexError("Pop from an empty stack")
        return self.polys.pop()


    def peek(self, depth=0):
        # The returned value stays owned by the stack
        if depth >= len(self.polys):
            raise IndexError(f"Cannot peek {depth} below the top of a stack of {len(self.polys)}")
        return self.polys[-1 - depth]


    def size(self):
        return len(self.polys)


    def is_empty(self):
        return not self.polys


    def __len__(self):
        return len(self.polys)


    def __iter__(self):
        # Bottom to top
        return iter(self.polys)


    def __repr__(self):
        return "[" + ", ".join(map(repr, self.polys)) + "]"
