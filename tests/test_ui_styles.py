import pytest

from lstheme.lsc import Pair, pairs
from lstheme.style import Fixed, Named, Style
from lstheme.ui_styles import ColourScale, Size, UiStyles


def _expected(path, style):
    styles = UiStyles()
    *parents, last = path.split(".")
    target = styles
    for name in parents:
        target = getattr(target, name)
    setattr(target, last, style)
    return styles


@pytest.mark.parametrize(
    "key, value, path, style",
    [
        ("di", "31", "filekinds.directory", Named.RED.normal()),
        ("ex", "32", "filekinds.executable", Named.GREEN.normal()),
        ("fi", "33", "filekinds.normal", Named.YELLOW.normal()),
        ("pi", "34", "filekinds.pipe", Named.BLUE.normal()),
        ("so", "35", "filekinds.socket", Named.PURPLE.normal()),
        ("bd", "36", "filekinds.block_device", Named.CYAN.normal()),
        ("cd", "35", "filekinds.char_device", Named.PURPLE.normal()),
        ("ln", "34", "filekinds.symlink", Named.BLUE.normal()),
        ("or", "33", "broken_symlink", Named.YELLOW.normal()),
    ],
)
def test_set_ls(key, value, path, style):
    styles = UiStyles()
    assert styles.set_ls(Pair(key, value)) is True
    assert styles == _expected(path, style)


@pytest.mark.parametrize(
    "key, value, path, style",
    [
        ("ur", "38;5;100", "perms.user_read", Fixed(100).normal()),
        ("uw", "38;5;101", "perms.user_write", Fixed(101).normal()),
        ("ux", "38;5;102", "perms.user_execute_file", Fixed(102).normal()),
        ("ue", "38;5;103", "perms.user_execute_other", Fixed(103).normal()),
        ("gr", "38;5;104", "perms.group_read", Fixed(104).normal()),
        ("gw", "38;5;105", "perms.group_write", Fixed(105).normal()),
        ("gx", "38;5;106", "perms.group_execute", Fixed(106).normal()),
        ("tr", "38;5;107", "perms.other_read", Fixed(107).normal()),
        ("tw", "38;5;108", "perms.other_write", Fixed(108).normal()),
        ("tx", "38;5;109", "perms.other_execute", Fixed(109).normal()),
        ("su", "38;5;110", "perms.special_user_file", Fixed(110).normal()),
        ("sf", "38;5;111", "perms.special_other", Fixed(111).normal()),
        ("xa", "38;5;112", "perms.attribute", Fixed(112).normal()),
        ("nb", "38;5;115", "size.number_byte", Fixed(115).normal()),
        ("nk", "38;5;116", "size.number_kilo", Fixed(116).normal()),
        ("nm", "38;5;117", "size.number_mega", Fixed(117).normal()),
        ("ng", "38;5;118", "size.number_giga", Fixed(118).normal()),
        ("nh", "38;5;119", "size.number_huge", Fixed(119).normal()),
        ("ub", "38;5;115", "size.unit_byte", Fixed(115).normal()),
        ("uk", "38;5;116", "size.unit_kilo", Fixed(116).normal()),
        ("um", "38;5;117", "size.unit_mega", Fixed(117).normal()),
        ("ug", "38;5;118", "size.unit_giga", Fixed(118).normal()),
        ("uh", "38;5;119", "size.unit_huge", Fixed(119).normal()),
        ("df", "38;5;115", "size.major", Fixed(115).normal()),
        ("ds", "38;5;116", "size.minor", Fixed(116).normal()),
        ("uu", "38;5;117", "users.user_you", Fixed(117).normal()),
        ("un", "38;5;118", "users.user_someone_else", Fixed(118).normal()),
        ("gu", "38;5;119", "users.group_yours", Fixed(119).normal()),
        ("gn", "38;5;120", "users.group_not_yours", Fixed(120).normal()),
        ("lc", "38;5;121", "links.normal", Fixed(121).normal()),
        ("lm", "38;5;122", "links.multi_link_file", Fixed(122).normal()),
        ("ga", "38;5;123", "git.new", Fixed(123).normal()),
        ("gm", "38;5;124", "git.modified", Fixed(124).normal()),
        ("gd", "38;5;125", "git.deleted", Fixed(125).normal()),
        ("gv", "38;5;126", "git.renamed", Fixed(126).normal()),
        ("gt", "38;5;127", "git.typechange", Fixed(127).normal()),
        ("xx", "38;5;128", "punctuation", Fixed(128).normal()),
        ("da", "38;5;129", "date", Fixed(129).normal()),
        ("in", "38;5;130", "inode", Fixed(130).normal()),
        ("bl", "38;5;131", "blocks", Fixed(131).normal()),
        ("hd", "38;5;132", "header", Fixed(132).normal()),
        ("lp", "38;5;133", "symlink_path", Fixed(133).normal()),
        ("cc", "38;5;134", "control_char", Fixed(134).normal()),
        ("bO", "4", "broken_path_overlay", Style().underline()),
    ],
)
def test_set_exa(key, value, path, style):
    styles = UiStyles()
    assert styles.set_exa(Pair(key, value)) is True
    assert styles == _expected(path, style)


def test_set_exa_sn_sets_every_number_style():
    styles = UiStyles()
    assert styles.set_exa(Pair("sn", "38;5;113")) is True
    style = Fixed(113).normal()
    size = styles.size
    assert [size.number_byte, size.number_kilo, size.number_mega,
            size.number_giga, size.number_huge] == [style] * 5
    assert size.unit_byte == Style()


def test_set_exa_sb_sets_every_unit_style():
    styles = UiStyles()
    assert styles.set_exa(Pair("sb", "38;5;114")) is True
    style = Fixed(114).normal()
    size = styles.size
    assert [size.unit_byte, size.unit_kilo, size.unit_mega,
            size.unit_giga, size.unit_huge] == [style] * 5
    assert size.number_byte == Style()


@pytest.mark.parametrize("key", ["uu", "*.txt", "Makefile", "zz"])
def test_set_ls_rejects_unknown_keys(key):
    styles = UiStyles()
    assert styles.set_ls(Pair(key, "31")) is False
    assert styles == UiStyles()


@pytest.mark.parametrize("key", ["di", "or", "*.zip", "bo"])
def test_set_exa_rejects_ls_and_unknown_keys(key):
    styles = UiStyles()
    assert styles.set_exa(Pair(key, "31")) is False
    assert styles == UiStyles()


def test_later_pairs_override_earlier_ones():
    styles = UiStyles()
    for pair in pairs("pi=31:pi=32:pi=33"):
        styles.set_ls(pair)
    assert styles.filekinds.pipe == Named.YELLOW.normal()

    styles = UiStyles()
    for pair in pairs("da=36:da=35:da=34"):
        styles.set_exa(pair)
    assert styles.date == Named.BLUE.normal()


def test_plain_has_no_styling():
    plain = UiStyles.plain()
    assert plain == UiStyles()
    assert plain.colourful is False
    assert plain.filekinds.directory == Style()


def test_default_theme_styles():
    theme = UiStyles.default_theme(ColourScale.FIXED)
    assert theme.colourful is True
    assert theme.filekinds.directory == Named.BLUE.bold()
    assert theme.perms.user_execute_file == Named.GREEN.bold().underline()
    assert theme.links.multi_link_file == Named.RED.on(Named.YELLOW)
    assert theme.git.ignored == Style().dimmed()
    assert theme.punctuation == Fixed(244).normal()
    assert theme.broken_path_overlay == Style().underline()


def test_default_theme_uses_the_scale():
    fixed = UiStyles.default_theme(ColourScale.FIXED)
    gradient = UiStyles.default_theme(ColourScale.GRADIENT)
    assert fixed.size == Size.colourful(ColourScale.FIXED)
    assert gradient.size == Size.colourful(ColourScale.GRADIENT)
    assert fixed.filekinds == gradient.filekinds


def test_size_colourful_fixed():
    size = Size.colourful(ColourScale.FIXED)
    assert size.number_huge == Named.GREEN.bold()
    assert size.unit_kilo == Named.GREEN.normal()
    assert size.major == Named.GREEN.bold()


def test_size_colourful_gradient():
    size = Size.colourful(ColourScale.GRADIENT)
    assert [size.number_byte, size.number_kilo, size.number_mega,
            size.number_giga, size.number_huge] == [
        Fixed(118).normal(), Fixed(190).normal(), Fixed(226).normal(),
        Fixed(220).normal(), Fixed(214).normal(),
    ]
    assert size.unit_huge == Named.GREEN.normal()
    assert size.minor == Named.GREEN.normal()


def test_default_themes_are_independent():
    first = UiStyles.default_theme(ColourScale.FIXED)
    second = UiStyles.default_theme(ColourScale.FIXED)
    first.set_ls(Pair("di", "31"))
    assert second.filekinds.directory == Named.BLUE.bold()
    assert first.filekinds.directory == Named.RED.normal()


def test_set_number_and_unit_style_directly():
    styles = UiStyles()
    styles.set_number_style(Named.RED.normal())
    styles.set_unit_style(Named.BLUE.normal())
    assert styles.size.number_giga == Named.RED.normal()
    assert styles.size.unit_mega == Named.BLUE.normal()
    assert styles.size.major == Style()