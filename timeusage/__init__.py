"""Average daily time use by working status, sex and age.

Reads the American Time Use Survey summary file, classifies its activity
columns into primary needs, work and other, and reports the grouped average
hours per day.
"""

__version__ = "0.1.0"
