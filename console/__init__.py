"""
Web layer of the Lime Tools console.

create_app() in console.main builds the FastAPI application.
"""
