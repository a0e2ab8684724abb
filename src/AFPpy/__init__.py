"""
The main package of AFPpy.

Do not directly import the `AFPpy` package, rather, import its modules (e.g.
`from AFPpy import flightpower as fp`).

This library is distributed under GNU GPLv3.
"""
