"""
Interfaces layer package.

Contains FastAPI routing, request decoders and the response encoder.
No business logic belongs here.
Routes decode, call an endpoint and encode its envelope.
"""
