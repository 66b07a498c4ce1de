"""
Words ignored when counting message keywords.

Matching is exact and case-sensitive against the token as it appears in the
message: "the" is skipped, "The" is counted.
"""
from __future__ import annotations

_ENGLISH = """
a's able about above abroad according accordingly across actually adj after
afterwards again against ago ahead ain't all allow allows almost alone along
alongside already also although always am amid amidst among amongst an and
another any anybody anyhow anyone anything anyway anyways anywhere apart
appear appreciate appropriate are aren't around as aside ask asking associated
at available away awfully back backward backwards be became because become
becomes becoming been before beforehand begin behind being believe below
beside besides best better between beyond both brief but by c'mon c's came
can can't cannot cant caption cause causes certain certainly changes clearly
co co. com come comes concerning consequently consider considering contain
containing contains corresponding could couldn't course currently dare daren't
definitely described despite did didn't different directly do does doesn't
doing don't done down downwards during each edu eg eight eighty either else
elsewhere end ending enough entirely especially et etc even ever evermore
every everybody everyone everything everywhere ex exactly example except
fairly far farther few fewer fifth first five followed following follows for
forever former formerly forth forward found four from further furthermore get
gets getting given gives go goes going gone got gotten greetings had hadn't
half happens hardly has hasn't have haven't having he he'd he'll he's
help hence her here here's hereafter hereby herein hereupon hers herself hi
him himself his hither hopefully how how's howbeit however hundred i'd i'll
i'm i've ie if ignored immediate in inasmuch inc inc. indeed indicate
indicated indicates inner inside insofar instead into inward is isn't it it'd
it'll it's its itself just keep keeps kept know known knows last lately later
latter latterly least less lest let let's like liked likely likewise little
look looking looks low lower ltd made mainly make makes many may maybe mayn't
me mean meantime meanwhile merely might mightn't mine minus miss more moreover
most mostly mr mrs much must mustn't my myself name namely nd near nearly
necessary need needn't needs neither never neverf neverless nevertheless new
next nine ninety no no-one nobody non none nonetheless noone nor normally not
nothing notwithstanding novel now nowhere obviously of off often oh ok okay
old on once one ones one's only onto opposite or other others otherwise ought
oughtn't our ours ourselves out outside over overall own particular
particularly past per perhaps placed please plus possible presumably probably
provided provides que quite qv rather rd re really reasonably recent recently
regarding regardless regards relatively respectively right round said same
saw say saying says second secondly see seeing seem seemed seeming seems seen
self selves sensible sent serious seriously seven several shall shan't she
she'd she'll she's should shouldn't since six so some somebody someday
somehow someone something sometime sometimes somewhat somewhere soon sorry
specified specify specifying still sub such sup sure t's take taken taking
tell tends th than thank thanks thanx that that'll that's that've thats the
their theirs them themselves then thence there there'd there'll there're
there's there've thereafter thereby therefore therein theres thereupon these
they they'd they'll they're they've thing things think third thirty this
thorough thoroughly those though three through throughout thru thus till to
together too took toward towards tried tries truly try trying twice two un
under underneath undoing unfortunately unless unlike unlikely until unto up
upon upwards us use used useful uses using usually value various versus very
via viz vs want wants was wasn't way we we'd we'll we're we've welcome well
went were weren't what what'll what's what've whatever when when's whence
whenever where where's whereafter whereas whereby wherein whereupon wherever
whether which whichever while whilst whither who who'd who'll who's whoever
whole whom whomever whose why why's will willing wish with within without
won't wonder would wouldn't yes yet you you'd you'll you're you've your yours
yourself yourselves zero
"""

_EXTRA = """
able ain aren couldn didn doesn don hadn hasn haven isn let mightn mustn
needn shan shouldn wasn weren won wouldn

also among amongst amoungst amount bill bottom call con cry de
describe detail due eleven empty fifteen fify fill find forty front full
give hasnt interest mill move part put show side sincere thick thin top
twelve twenty

i me my we our you he him his she her it they them what which who this that
these those am is are was were be been being have has had do does did a an
the and but if or because as until while of at by for with about against
between into through during before after above below to from up down in out
on off over under again further then once here there when where why how all
any both each few more most other some such no nor not only own same so than
too very s t can will just don should now
"""

_LETTERS = " ".join("abcdefghijklmnopqrstuvwxyz")

# Tokens that show up constantly in system logs and carry no meaning on their own.
_NOISE = """
0 1 2 3 4 5 6 7 8 9 00 = - -- --- : :: ; , . .. ... | || / \\ * # & + > < >= <=
-> => ( ) [ ] { } " ' ` ~ ! ? @ $ % ^ _ (null) null none nil true false yes no
ok on off
"""

STOPWORDS: frozenset[str] = frozenset(
    (_ENGLISH + _EXTRA + _LETTERS + _NOISE).split()
)
