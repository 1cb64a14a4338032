from rich.pretty import pprint

from procargs import *

__prog__ = "procargs-demo"

spec = [
    "-nodisk", False,                                   # flag with a default
    "-workers|-w=num", 0,                               # numeric, with a synonym
    "-name=str", "",                                    # free text
    "-file=file", "",                                   # existing file
    "-dir=dir", "",                                     # existing directory
    "-disk=yesno", True,                                # yes/no
    "-output=filepath", None,                           # file whose directory exists
    "-dirs=[dir]", None,                                # several directories
    "-input=[file]", [],                                # several files
    "-names=[str]", [],                                 # several strings
    "-files=list=normal,all,hidden,system", "normal",   # one of a fixed set
]


if __name__ == '__main__':
    pprint(process_argv(spec, fancy=True).todict())
