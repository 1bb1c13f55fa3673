class Context:
    def __init__(self, filename, line_no, code):
        self.filename = filename
        self.line_no = line_no
        self.code = code
        self.pos = 0


    def save(self):
        ctx = Context(self.filename, self.line_no, self.code)
        ctx.pos = self.pos
        return ctx


    def restore(self, ctx):
        self.pos = ctx.pos


    def peek(self):
        return self.code[self.pos:self.pos + 1]


    def eof(self):
        return self.pos >= len(self.code)


    def __repr__(self):
        return f"{self.filename}:{self.line_no}:{self.pos + 1}"
