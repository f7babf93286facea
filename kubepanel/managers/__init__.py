"""State managers for the provisioning workflow and the session.

Each module owns one piece of client state and its transitions.  Managers
take their collaborators (stores, remote endpoints, notifier) as constructor
arguments and raise domain exceptions (``LookupError``, ``ValueError``,
``RuntimeError`` subclasses); turning failures into user notices happens at
the boundary where an async operation is awaited.
"""
