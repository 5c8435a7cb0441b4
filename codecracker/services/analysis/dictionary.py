"""
English word coverage.

The word list is embedded so the scorer works without any file or network
access. It is injected into the scorer as a plain callable, so a larger list
can replace it without touching the scoring code.
"""

import re

_TOKEN_SPLIT = re.compile(r"[\s,.!?;:'\"()\[\]{}\-/\\]+")
_NON_LOWER = re.compile(r"[^a-z]")

_WORDS = """
a able about above across act actually add after again against age ago agree
air all allow almost alone along already also although always am among an and
animal another answer any anyone anything appear apple are area arm army
around arrive art as ask at attack away baby back bad bag ball bank base be
bear beat beautiful because become bed been before began begin behind being
believe below best better between big bird black blood blue board boat body
book both box boy break bring brother brown build business but buy by call
came can car care carry case cat catch cause center certain chance change
charge check child children choose cipher city class clear close code cold
color come common company complete computer consider contain control cook
cool corner cost could count country course cover create cross crypto cut
dark data dawn day dead deal dear decide decode deep describe design develop
did die different difficult dinner direct do doctor does dog dollar done door
down draw dream drive drop dry during each ear early earth east easy eat edge
effect egg eight either else end enemy energy enough enter even evening event
ever every everyone everything example except eye face fact fall family far
farm fast father fear feel feet few field fight figure fill final find fine
fire first fish five flag floor fly follow food foot for force forest form
forward found four fox free friend from front full fun game garden gave get
girl give glass go god gold gone good got great green ground group grow guess
guy had hair half hand happen happy hard has hat have he head hear heard
heart heat heavy held hello help her here hidden hide high hill him his
history hit hold hole home hope horse hot hour house how however human
hundred hunt i ice idea if important in inside instead into is island it its
job join jump jumps just keep kept key kill kind king knew know known land
language large last late later laugh law lay lazy lead learn least leave left
leg less let letter level lie life light like line list listen little live
long look lost lot love low machine made main make man many map mark market
matter may me mean meet meeting member men message met middle might mile mind
minute miss moment money month moon more morning most mother mountain move
much music must my name nation near need never new news next night nine no
noon north not note nothing notice now number of off office often oh oil old
on once one only open or order other our out outside over own page paper part
party pass past pay people perhaps person pick picture piece place plain plan
plant play please point police poor position possible power present pretty
problem program public pull push put question quick quickly quiet quite rain
ran reach read ready real reason receive red remember rest result return rich
ride right river road rock room round rule run safe said same sat save saw
say school science sea second secret see seem seen sell send sense sent
service set seven several shall she ship short should show side sign simple
since sing sister sit six size sleep slow small snow so some someone
something sometimes son song soon sound south space speak special spring
stand star start state stay step still stone stop story street strong study
such summer sun sure system table take talk teacher team tell ten test text
than thank that the their them then there these they thing think third this
those though thought three through time to today together told tomorrow too
took top toward town tree tried true try turn two under understand until up
upon us use usually very voice wait walk wall want war warm was watch water
way we wear weather week well went were west what when where whether which
while white who whole why wide wife will win wind window winter wish with
within without woman women wonder wood word words work world would write
wrong year yes yet you young your
"""

ENGLISH_WORDS: frozenset[str] = frozenset(_WORDS.split())


def dictionary_word_ratio(text: str) -> float:
    """
    Character-weighted share of tokens that are known English words.

    Tokens are split on whitespace and punctuation, then reduced to their
    letters. Returns 0.0 for text without letters.
    """
    if not text:
        return 0.0

    matched = 0
    total = 0
    for token in _TOKEN_SPLIT.split(text.lower()):
        clean = _NON_LOWER.sub("", token)
        if not clean:
            continue
        total += len(clean)
        if clean in ENGLISH_WORDS:
            matched += len(clean)

    return matched / total if total else 0.0


def is_likely_english(text: str) -> bool:
    """More than half of the text is covered by dictionary words."""
    return dictionary_word_ratio(text) > 0.5
