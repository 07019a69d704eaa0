"""Sprout: plant, commit and publish small project skeletons."""
