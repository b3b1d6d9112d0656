"""Command line front ends for :mod:`numkit`."""
