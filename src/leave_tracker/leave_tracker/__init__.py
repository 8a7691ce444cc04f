"""Leave Tracker package.

Tracks sick, child-care and parental leave per person. Organized by feature
modules (personnel, leave, metrics, storage) with a thin Flask controller
layer over service/registry classes.
"""
