#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Porter Stemming Algorithm

This is the Porter stemming algorithm as presented in

Porter, 1980, An algorithm for suffix stripping, Program, Vol. 14,
no. 3, pp 130-137,

following the ANSI C reference version by the author, and so only differing
from the paper at the points marked --DEPARTURE-- below.

See also http://www.tartarus.org/~martin/PorterStemmer

Notes
-----
Every call to :func:`~porterstem.parsing.porter.stem` works on its own :class:`_Buffer`,
so neither the module functions nor a :class:`~porterstem.parsing.porter.PorterStemmer`
instance hold any per-word state. They are safe to share between threads.

Only the ASCII letters A-Z are lowercased before stemming, so a stem is never longer than its
word. Characters other than the letters a-z are treated as consonants that no suffix rule
matches, so they are carried through mostly unchanged.

Examples
--------
.. sourcecode:: pycon

    >>> from porterstem.parsing.porter import PorterStemmer
    >>> p = PorterStemmer()
    >>> p.stem_sentence("Cats and ponies have meeting")
    'cat and poni have meet'

    >>> p.stem_documents(["Cats and ponies", "have meeting"])
    ['cat and poni', 'have meet']

"""

import string
from collections import namedtuple

from porterstem import utils

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


SuffixRule = namedtuple('SuffixRule', 'suffix replacement min_measure condition')
"""A single suffix rewriting rule.

`suffix` is replaced by `replacement` when the measure of the stem in front of it is at least
`min_measure` and `condition` (a callable taking the :class:`_Buffer`, or None) holds.
"""


def _preceded_by_s_or_t(buf):
    return buf.j >= 0 and buf.b[buf.j] in "st"


# Double suffixes mapped to single ones, e.g. -ization (= -ize plus -ation) to -ize.
STEP2_RULES = (
    SuffixRule("ational", "ate", 1, None),
    SuffixRule("tional", "tion", 1, None),
    SuffixRule("enci", "ence", 1, None),
    SuffixRule("anci", "ance", 1, None),
    SuffixRule("izer", "ize", 1, None),
    SuffixRule("bli", "ble", 1, None),  # --DEPARTURE-- the paper has abli -> able
    SuffixRule("alli", "al", 1, None),
    SuffixRule("entli", "ent", 1, None),
    SuffixRule("eli", "e", 1, None),
    SuffixRule("ousli", "ous", 1, None),
    SuffixRule("ization", "ize", 1, None),
    SuffixRule("ation", "ate", 1, None),
    SuffixRule("ator", "ate", 1, None),
    SuffixRule("alism", "al", 1, None),
    SuffixRule("iveness", "ive", 1, None),
    SuffixRule("fulness", "ful", 1, None),
    SuffixRule("ousness", "ous", 1, None),
    SuffixRule("aliti", "al", 1, None),
    SuffixRule("iviti", "ive", 1, None),
    SuffixRule("biliti", "ble", 1, None),
    SuffixRule("logi", "log", 1, None),  # --DEPARTURE-- not in the paper
)

# -ic-, -full, -ness etc.
STEP3_RULES = (
    SuffixRule("icate", "ic", 1, None),
    SuffixRule("ative", "", 1, None),
    SuffixRule("alize", "al", 1, None),
    SuffixRule("iciti", "ic", 1, None),
    SuffixRule("ical", "ic", 1, None),
    SuffixRule("ful", "", 1, None),
    SuffixRule("ness", "", 1, None),
)

# -ant, -ence etc. removed in context <c>vcvc<v>.
STEP4_RULES = (
    SuffixRule("al", "", 2, None),
    SuffixRule("ance", "", 2, None),
    SuffixRule("ence", "", 2, None),
    SuffixRule("er", "", 2, None),
    SuffixRule("ic", "", 2, None),
    SuffixRule("able", "", 2, None),
    SuffixRule("ible", "", 2, None),
    SuffixRule("ant", "", 2, None),
    SuffixRule("ement", "", 2, None),
    SuffixRule("ment", "", 2, None),
    SuffixRule("ent", "", 2, None),
    SuffixRule("ion", "", 2, _preceded_by_s_or_t),
    SuffixRule("ou", "", 2, None),  # takes care of -ous
    SuffixRule("ism", "", 2, None),
    SuffixRule("ate", "", 2, None),
    SuffixRule("iti", "", 2, None),
    SuffixRule("ous", "", 2, None),
    SuffixRule("ive", "", 2, None),
    SuffixRule("ize", "", 2, None),
)


class _Buffer(object):
    """Working buffer of a single stemming call.

    `b` holds the word being stemmed. The letters still in play are b[0], b[1] ... b[k];
    `k` is readjusted downwards as the stemming progresses. `j` is a general offset into
    the string, set by :meth:`ends` to the last letter before a matched suffix.

    """
    __slots__ = ('b', 'k', 'j')

    def __init__(self, word):
        self.b = word
        self.k = len(word) - 1
        self.j = 0

    def cons(self, i):
        """Check if b[i] is a consonant.

        Parameters
        ----------
        i : int

        Returns
        -------
        bool
            True, if b[i] is a consonant, otherwise - False.

        Examples
        --------
        .. sourcecode:: pycon

            >>> from porterstem.parsing.porter import _Buffer
            >>> _Buffer("hi").cons(1)
            False
            >>> _Buffer("toy").cons(2)
            True

        """
        ch = self.b[i]
        if ch in "aeiou":
            return False
        if ch == 'y':
            return i == 0 or not self.cons(i - 1)
        return True

    def m(self):
        """Measure the number of consonant sequences between 0 and j.

        If c is a consonant sequence and v a vowel sequence, and <..>
        indicates arbitrary presence,

           <c><v>       gives 0
           <c>vc<v>     gives 1
           <c>vcvc<v>   gives 2
           <c>vcvcvc<v> gives 3

        Returns
        -------
        int
            The measure of b[0..j].

        Examples
        --------
        .. sourcecode:: pycon

            >>> from porterstem.parsing.porter import _Buffer
            >>> buf = _Buffer("troubles")
            >>> buf.j = 7
            >>> buf.m()
            2

        """
        n = 0
        i = 0
        j = self.j
        # skip the optional leading consonant sequence
        while i <= j and self.cons(i):
            i += 1
        while i <= j:
            while i <= j and not self.cons(i):
                i += 1
            if i > j:
                break
            n += 1
            while i <= j and self.cons(i):
                i += 1
        return n

    def vowel_in_stem(self):
        """Check if b[0..j] contains a vowel."""
        return not all(self.cons(i) for i in range(self.j + 1))

    def doublec(self, i):
        """Check if b[i-1], b[i] contain a double consonant.

        Examples
        --------
        .. sourcecode:: pycon

            >>> from porterstem.parsing.porter import _Buffer
            >>> _Buffer("hopp").doublec(3)
            True
            >>> _Buffer("seed").doublec(2)
            False

        """
        return i > 0 and self.b[i] == self.b[i - 1] and self.cons(i)

    def cvc(self, i):
        """Check if b[i-2], b[i-1], b[i] have the form consonant - vowel - consonant
        and also if the second c is not w, x or y. This is used when trying to
        restore an e at the end of a short word, e.g.

           cav(e), lov(e), hop(e), crim(e), but
           snow, box, tray.

        Examples
        --------
        .. sourcecode:: pycon

            >>> from porterstem.parsing.porter import _Buffer
            >>> _Buffer("lib").cvc(2)
            True
            >>> _Buffer("box").cvc(2)
            False

        """
        if i < 2 or not self.cons(i) or self.cons(i - 1) or not self.cons(i - 2):
            return False
        return self.b[i] not in "wxy"

    def ends(self, s):
        """Check if b[0..k] ends with `s`, and if so point j at the letter before it."""
        length = len(s)
        if length > self.k + 1:
            return False
        if self.b[self.k - length + 1:self.k + 1] != s:
            return False
        self.j = self.k - length
        return True

    def setto(self, s):
        """Set b[j+1..] to the characters in `s`, adjusting k."""
        self.b = self.b[:self.j + 1] + s
        self.k = len(self.b) - 1

    def apply(self, rules):
        """Apply the first rule of `rules` whose suffix matches; later rules are never tried.

        Returns
        -------
        bool
            True if a suffix matched, whether or not its measure gate let it fire.

        """
        for rule in rules:
            if self.ends(rule.suffix):
                if self.m() >= rule.min_measure and (rule.condition is None or rule.condition(self)):
                    self.setto(rule.replacement)
                return True
        return False

    def word(self):
        return self.b[:self.k + 1]


def _step1ab(buf):
    """Get rid of plurals and -ed or -ing. E.g.,

       caresses  ->  caress
       ponies    ->  poni
       ties      ->  ti
       caress    ->  caress
       cats      ->  cat

       feed      ->  feed
       agreed    ->  agree
       disabled  ->  disable

       matting   ->  mat
       mating    ->  mate
       meeting   ->  meet
       milling   ->  mill
       messing   ->  mess

       meetings  ->  meet

    """
    if buf.b[buf.k] == 's':
        if buf.ends("sses"):
            buf.k -= 2
        elif buf.ends("ies"):
            buf.setto("i")
        elif buf.b[buf.k - 1] != 's':
            buf.k -= 1
    if buf.ends("eed"):
        if buf.m() > 0:
            buf.k -= 1
    elif (buf.ends("ed") or buf.ends("ing")) and buf.vowel_in_stem():
        buf.k = buf.j
        if buf.ends("at"):
            buf.setto("ate")
        elif buf.ends("bl"):
            buf.setto("ble")
        elif buf.ends("iz"):
            buf.setto("ize")
        elif buf.doublec(buf.k):
            if buf.b[buf.k] not in "lsz":
                buf.k -= 1
        elif buf.m() == 1 and buf.cvc(buf.k):
            buf.setto("e")


def _step1c(buf):
    """Turn terminal y to i when there is another vowel in the stem."""
    if buf.ends("y") and buf.vowel_in_stem():
        buf.b = buf.b[:buf.k] + 'i'


def _step2(buf):
    """Map double suffices to single ones.

    So, -ization ( = -ize plus -ation) maps to -ize etc. Note that the
    string before the suffix must give m() > 0.

    """
    buf.apply(STEP2_RULES)


def _step3(buf):
    """Deal with -ic-, -full, -ness etc. Similar strategy to :func:`_step2`."""
    buf.apply(STEP3_RULES)


def _step4(buf):
    """Take off -ant, -ence etc., in context <c>vcvc<v>."""
    buf.apply(STEP4_RULES)


def _step5(buf):
    """Remove a final -e if m() > 1, and change -ll to -l if m() > 1."""
    k = buf.j = buf.k
    if buf.b[k] == 'e':
        a = buf.m()
        if a > 1 or (a == 1 and not buf.cvc(k - 1)):
            buf.k -= 1
    if buf.b[buf.k] == 'l' and buf.doublec(buf.k) and buf.m() > 1:
        buf.k -= 1


STEPS = (_step1ab, _step1c, _step2, _step3, _step4, _step5)


def stem(word):
    """Stem `word`, return the stemmed form.

    Parameters
    ----------
    word : {str, bytes}
        A single word. Bytestrings are decoded as utf8.

    Returns
    -------
    str
        Stemmed version of `word`, with A-Z lowercased. Other characters keep their case.

    Raises
    ------
    TypeError
        If `word` is not a string (e.g. None).

    Examples
    --------
    .. sourcecode:: pycon

        >>> from porterstem.parsing.porter import stem
        >>> stem("caresses")
        'caress'
        >>> stem("troubleshooting")
        'troubleshoot'

    """
    if not isinstance(word, (str, bytes)):
        raise TypeError("expected a str or bytes word, got %s" % type(word).__name__)
    word = utils.to_unicode(word).translate(_ASCII_LOWER)
    if len(word) <= 2:
        return word  # --DEPARTURE--

    # With this line, strings of length 1 or 2 don't go through the
    # stemming process, although no mention is made of this in the
    # published algorithm.

    buf = _Buffer(word)
    for step in STEPS:
        step(buf)
    return buf.word()


class PorterStemmer(object):
    """Stem words, sentences and documents with the Porter algorithm.

    Instances keep no state between calls, so a single instance may be shared freely.

    """
    def stem(self, w):
        """Stem the word `w`, see :func:`~porterstem.parsing.porter.stem`.

        Examples
        --------
        .. sourcecode:: pycon

            >>> from porterstem.parsing.porter import PorterStemmer
            >>> p = PorterStemmer()
            >>> p.stem("Matting")
            'mat'

        """
        return stem(w)

    def stem_sentence(self, txt):
        """Stem every whitespace-separated word of `txt`.

        Parameters
        ----------
        txt : str

        Returns
        -------
        str
            Stemmed words joined by single spaces.

        """
        return " ".join(self.stem(x) for x in txt.split())

    def stem_documents(self, docs):
        """Stem every document of `docs` with :meth:`stem_sentence`.

        Parameters
        ----------
        docs : iterable of str

        Returns
        -------
        list of str

        """
        return [self.stem_sentence(x) for x in docs]
