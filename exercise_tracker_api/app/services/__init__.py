"""
Service layer.

``UserService`` and ``ExerciseService`` talk to the database;
``log_service`` holds the pure log-shaping functions.
"""
