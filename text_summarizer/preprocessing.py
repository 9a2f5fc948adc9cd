from __future__ import annotations
import re
import logging
from collections import Counter
from dataclasses import dataclass
from typing import List, Dict, Optional, Pattern
from .datatypes import Document, Sentence

logger = logging.getLogger(__name__)

# English stopword set; swap the constant to change language
STOPWORDS = frozenset({
    'a','about','above','after','again','against','ain','all','am','an','and','any','are','aren',"aren't",
    'as','at','be','because','been','before','being','below','between','both','but','by','can','couldn',
    "couldn't",'d','did','didn',"didn't",'do','does','doesn',"doesn't",'doing','don',"don't",'down','during',
    'each','few','for','from','further','had','hadn',"hadn't",'has','hasn',"hasn't",'have','haven',"haven't",
    'having','he',"he'd","he'll","he's",'her','here','hers','herself','him','himself','his','how','i',"i'd",
    "i'll","i'm","i've",'if','in','into','is','isn',"isn't",'it',"it'd","it'll","it's",'its','itself','just',
    'll','m','ma','me','mightn',"mightn't",'more','most','mustn',"mustn't",'my','myself','needn',"needn't",
    'no','nor','not','now','o','of','off','on','once','only','or','other','our','ours','ourselves','out',
    'over','own','re','s','same','shan',"shan't",'she',"she'd","she'll","she's",'should',"should've",
    'shouldn',"shouldn't",'so','some','such','t','than','that',"that'll",'the','their','theirs','them',
    'themselves','then','there','these','they',"they'd","they'll","they're","they've",'this','those',
    'through','to','too','under','until','up','ve','very','was','wasn',"wasn't",'we',"we'd","we'll",
    "we're","we've",'were','weren',"weren't",'what','when','where','which','while','who','whom','why',
    'will','with','won',"won't",'would','wouldn',"wouldn't",'y','you',"you'd","you'll","you're","you've",
    'your','yours','yourself','yourselves','also','could','however','may','might','must','shall',
})

# split after . ! ? (optionally closed by a quote or bracket) followed by whitespace
_SENT_SPLIT_RE = re.compile(r"""(?<=[.!?])\s+|(?<=[.!?]["')\]])\s+""")

@dataclass(frozen=True)
class PreprocessConfig:
    lowercase: bool = True
    remove_stopwords: bool = True
    allow_digits: bool = False
    allow_apostrophes: bool = False

def _word_pattern(cfg: PreprocessConfig) -> Pattern[str]:
    # unicode letters, so "café" stays one token
    chars = r"[^\W_]" if cfg.allow_digits else r"[^\W\d_]"
    if cfg.allow_apostrophes:
        return re.compile(rf"{chars}+(?:'{chars}+)*")
    return re.compile(rf"{chars}+")

def split_sentences(text: str) -> List[str]:
    # Split on . ! ? while keeping order; "Dr." style abbreviations are split too
    parts = _SENT_SPLIT_RE.split(text.strip())
    return [p.strip() for p in parts if p and p.strip()]

def tokenize(text: str, cfg: Optional[PreprocessConfig] = None) -> List[str]:
    cfg = cfg or PreprocessConfig()
    if cfg.lowercase:
        text = text.lower()
    if cfg.allow_apostrophes:
        text = text.replace("’", "'")
    toks = _word_pattern(cfg).findall(text)
    if cfg.remove_stopwords:
        toks = [t for t in toks if t.lower() not in STOPWORDS]
    return toks

def build_frequency_map(tokens: List[str]) -> Dict[str, int]:
    """Plain term frequency; no IDF weighting."""
    return dict(Counter(tokens))

def segment_and_vectorize(text: str, cfg: Optional[PreprocessConfig] = None) -> List[Sentence]:
    cfg = cfg or PreprocessConfig()
    sentences = []
    for i, s in enumerate(split_sentences(text)):
        tokens = tokenize(s, cfg)
        sentences.append(Sentence(idx=i, text=s, tokens=tuple(tokens),
                                  freq_map=build_frequency_map(tokens)))
    logger.debug("segmented %d sentences, %d tokens",
                 len(sentences), sum(len(s.tokens) for s in sentences))
    return sentences

def preprocess_text(text: str, cfg: Optional[PreprocessConfig] = None) -> Document:
    return Document(raw_text=text, sentences=segment_and_vectorize(text, cfg))
