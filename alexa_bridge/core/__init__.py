"""Core types shared by the Alexa bridge: models, results, errors and
collaborator protocols."""
