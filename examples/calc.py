"""
Interactive calculator
======================

A small REPL on top of lark_calculator.

Type an equation at the prompt to get its value. ``:tree`` followed by an
equation shows the expression tree instead, with the precedence resolved.
"""
from lark_calculator import Calculator, CalculatorError

calculator = Calculator()


def main():
    while True:
        try:
            s = input('> ')
        except EOFError:
            break

        try:
            if s.startswith(':tree'):
                print(calculator.parse(s[len(':tree'):].lstrip(' ')))
            else:
                print(calculator.calc(s))
        except CalculatorError as e:
            print("Error: %s" % e)


def test():
    print(calculator.calc("1+2*-3"))
    print(calculator.parse("10-3-2"))


if __name__ == '__main__':
    # test()
    main()
