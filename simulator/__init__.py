"""
Simulator package for the Geminus balance simulator.

This package contains all the modules of the balance engine, including content
loading, derived stats, monster scaling, combat simulation and loot.
"""
