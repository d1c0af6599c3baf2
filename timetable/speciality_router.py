"""
Routing FEN disciplines into their specialities.

FEN workbooks list several specialities and tag each discipline with the
specialities it belongs to, in parentheses:

    "Вища математика"                 -> every speciality (shared core course)
    "Фізика (122+125)"                -> specialities matching "122" or "125"
    "Хімія (Комп.Інж)"                -> specialities matching "Комп" or "Інж"

Tags are matched as case-insensitive substrings of speciality names. Before a
discipline is routed, its group and auditorium are normalized by filter_fen.

Functions:
    split_tags: Split a tag group on its first delimiter
    speciality_tags: Tag lists for every parenthesized group in a name
    has_no_parentheses: True for shared core courses
    filter_fen: Normalize group/auditorium of a FEN discipline
    route_disciplines: Distribute disciplines over a department's specialities
"""

import re

from .config import (
    LECTURE_LABEL,
    LECTURE_TOKEN,
    NO_PARENTHESES_PATTERN,
    PARENTHESES_PATTERN,
    REMOTE_LABEL,
    REMOTE_MARKER,
    TAG_DELIMITERS,
)

_parentheses_re = re.compile(PARENTHESES_PATTERN)
_no_parentheses_re = re.compile(NO_PARENTHESES_PATTERN)
_digits_re = re.compile(r"[0-9]+")


def split_tags(text, delimiters=None):
    """
    Split a tag group on the first delimiter (by priority) that it contains.

    Only that delimiter splits; the others stay inside the tokens. Trailing
    empty tokens are dropped and tokens are not trimmed.

    Examples:
        >>> split_tags("А+Б.В,Г")
        ['А', 'Б.В,Г']
        >>> split_tags("122.125")
        ['122', '125']
        >>> split_tags("122")
        ['122']
    """
    if delimiters is None:
        delimiters = TAG_DELIMITERS

    for delimiter in delimiters:
        if delimiter in text:
            tokens = text.split(delimiter)
            while tokens and not tokens[-1]:
                tokens.pop()
            return tokens

    return [text]


def speciality_tags(name):
    """
    Return one tag list per parenthesized group in a discipline name.

    Examples:
        >>> speciality_tags("Фізика ( 122+125 ) (Лаб)")
        [['122', '125'], ['Лаб']]
    """
    return [split_tags(match.group(1).strip()) for match in _parentheses_re.finditer(name)]


def has_no_parentheses(name):
    return _no_parentheses_re.fullmatch(name) is not None


def filter_fen(discipline):
    """
    Normalize the group and auditorium of a FEN discipline in place.

    Rules, applied in order:
        1. A group mentioning a lecture becomes the lecture label
        2. The single-letter remote auditorium becomes the remote label
        3. A group containing digits is reduced to its first digit run

    Absent (None) fields are left alone.

    Returns:
        Discipline: The same record

    Examples:
        group "Лекція 101" -> "Лекція", group "гр.12" -> "12",
        auditorium "Д" -> "Дистанційно"
    """
    if discipline.group is not None and LECTURE_TOKEN in discipline.group.lower():
        discipline.group = LECTURE_LABEL

    if discipline.auditorium is not None and discipline.auditorium.lower() == REMOTE_MARKER:
        discipline.auditorium = REMOTE_LABEL

    if discipline.group is not None:
        match = _digits_re.search(discipline.group)
        if match:
            discipline.group = match.group()

    return discipline


def add_to_all_specialities(department, discipline):
    for speciality in department.specialities:
        speciality.disciplines.append(filter_fen(discipline))


def add_to_matching_specialities(department, discipline, tags):
    """Append the discipline once per tag found in a speciality's name."""
    for speciality in department.specialities:
        speciality_name = speciality.name.lower()
        for tag in tags:
            if tag.lower() in speciality_name:
                speciality.disciplines.append(filter_fen(discipline))


def route_disciplines(department, disciplines):
    """
    Distribute disciplines over the specialities of a FEN department.

    A name without parentheses goes to every speciality. Otherwise every
    parenthesized group is matched separately; a group whose tags match no
    speciality drops the discipline for that group, with no fallback.

    Returns:
        Department: The same department, with speciality lists filled
    """
    for discipline in disciplines:
        if has_no_parentheses(discipline.name):
            add_to_all_specialities(department, discipline)

        for tags in speciality_tags(discipline.name):
            add_to_matching_specialities(department, discipline, tags)

    return department
