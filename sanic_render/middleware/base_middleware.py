"""
Base Middleware Class
Abstract base class for request middlewares
"""
from abc import ABC, abstractmethod
from sanic import Request, Sanic


class Middleware(ABC):
    """
    Base middleware class

    Middlewares can:
    - Inspect/modify requests before they reach routes
    - Short-circuit requests (return response early)
    """

    @abstractmethod
    async def before_request(self, request: Request):
        """
        Called before the request reaches the route handler

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """
        pass

    def install(self, app: Sanic) -> 'Middleware':
        """Register before_request as Sanic request middleware (chainable)"""
        app.register_middleware(self.before_request, 'request')
        return self
