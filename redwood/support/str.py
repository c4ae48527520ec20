"""
String Helper Functions
Naming-convention utilities for views and context classes
"""


class Str:
    """
    String manipulation helper class

    Provides static methods for the naming conventions views follow
    """

    @staticmethod
    def capitalize(value: str) -> str:
        """
        Upper-case the first character and lower-case the rest

        Example:
            Str.capitalize('home')  # 'Home'
            Str.capitalize('BLOG')  # 'Blog'
        """
        if not value:
            return value

        return value[0].upper() + value[1:].lower()
