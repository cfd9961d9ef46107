"""
Wrapper around creating a parallel function call
"""

from collections.abc import Callable, Iterable
from typing import Any

import gevent.pool


def parallel_call(
	function: Callable,
	args: Iterable[tuple[Any, ...]],
	pool_size: int = 16,
) -> list[Any]:
	"""
	Execute a function in parallel, over a bounded pool of greenlets.
	Each entry of args is unpacked into the function's arguments.
	The first exception raised by a call is raised here.
	:param function: Function to execute
	:param args: Argument tuples, one per call
	:param pool_size: How large the gevent pool should be
	:return: Results from execution, in the order of args
	"""
	pool = gevent.pool.Pool(pool_size)
	return list(pool.map(lambda g_args: function(*g_args), args))
