'''
Allows running the calculator with python -m exprcalc.
'''

from .cli import CLI


if __name__ == '__main__':
    CLI().run()
