import attr


TRUE_VALUES = ('1', 't', 'T', 'TRUE', 'true', 'True')
FALSE_VALUES = ('0', 'f', 'F', 'FALSE', 'false', 'False')


def parse_bool(text):
    # same spellings as Go's strconv.ParseBool
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value '{text}'")


@attr.s(auto_attribs=True, frozen=True)
class Config(object):
    package: str = ''
    var: str = ''
    gzip: bool = False
