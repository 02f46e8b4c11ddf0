"""
Text Preprocessor Module

Turns raw lines of text (typically tweets) into clean sentences of lowercase
word tokens that can be fed to MarkovChain.train.

### Pipeline (`sentences`):
1. Remove URLs
2. Remove @mentions and #hashtags, collapse repeated characters
3. Split into sentences on `.`, `?`, `!` and `;`
4. Lowercase, strip punctuation and tokenize each sentence
5. Drop sentences that end up empty

### Example Usage:

```python
preprocessor = TextPreprocessor()
preprocessor.sentences("A table. A banana? A banana! http://t.co/x")
# [['a', 'table'], ['a', 'banana'], ['a', 'banana']]
```
"""

import re
import string

# Apostrophes are kept so contractions stay one word
PUNCTUATION = string.punctuation.replace("'", "")
SENTENCE_BOUNDARY = re.compile(r"[.?!;]+")
WORD = re.compile(r"[a-z0-9]+(?:'[a-z0-9]+)*")


class TextPreprocessor:
    """Cleans text and splits it into tokenized sentences."""

    def to_lowercase(self, text):
        """Converts text to lowercase."""
        return text.lower()

    def remove_punctuation(self, text):
        """Removes punctuation from text, keeping apostrophes."""
        return text.translate(str.maketrans("", "", PUNCTUATION))

    def handle_urls(self, text):
        """Removes URLs from text."""
        return re.sub(r"http\S+|www\S+|https\S+", "", text, flags=re.MULTILINE)

    def normalize_social_media_text(self, text):
        """Removes mentions and hashtags and collapses characters repeated 3+ times."""
        text = re.sub(r"@\w+", "", text)
        text = re.sub(r"#\w+", "", text)
        text = re.sub(r"(.)\1{2,}", r"\1", text)
        return text.strip()

    def handle_whitespace(self, text):
        """Removes extra whitespace from text."""
        return " ".join(text.split())

    def handle_missing_data(self, text):
        """Replaces None with an empty string."""
        return text if text else ""

    def sentence_segmentation(self, text):
        """Splits text into sentences, dropping blank ones."""
        parts = SENTENCE_BOUNDARY.split(text)
        return [self.handle_whitespace(part) for part in parts if part.strip()]

    def tokenize(self, sentence):
        """
        Lowercases a sentence and splits it into word tokens.

        Args:
            sentence (str): One sentence of text

        Returns:
            list: Word tokens with punctuation removed
        """
        sentence = self.remove_punctuation(self.to_lowercase(sentence))
        return WORD.findall(sentence)

    def sentences(self, text):
        """
        Runs the whole pipeline on one line of text.

        Args:
            text (str): Raw text, may be None

        Returns:
            list of list of str: One token list per non-empty sentence
        """
        text = self.handle_missing_data(text)
        text = self.handle_urls(text)
        text = self.normalize_social_media_text(text)

        result = []
        for sentence in self.sentence_segmentation(text):
            tokens = self.tokenize(sentence)
            if tokens:
                result.append(tokens)
        return result
