import re
from keyword import iskeyword

NOT_ALPHANUMERIC = re.compile(r'[^0-9a-zA-Z]+')


def phrase2snake(phrase: str) -> str:
    """
    Turns a reason phrase into a function name: Not Found -> not_found,
    Non-Authoritative Information -> non_authoritative_information

    Names that are python keywords get a trailing underscore (continue_)
    """

    name = NOT_ALPHANUMERIC.sub('_', phrase).strip('_').lower()

    return name + '_' if iskeyword(name) else name


def snake2camelcase(string):
    """
    content-type -> Content-Type, www-authenticate -> Www-Authenticate
    Both dashes and underscores are accepted as separators
    """

    return '-'.join(element.capitalize() for element in string.replace('_', '-').split('-'))
