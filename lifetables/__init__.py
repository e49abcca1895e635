"""
SSA Life Tables - Cohort survivorship collector

Fetches the SSA cohort life table pages for a range of years and turns each
one into a validated survivorship table (male/female, by age).
"""
