"""TF-IDF vector space with a semantic word-cluster bonus."""
import math
import logging
from typing import Dict, Iterable, List, Mapping, Optional

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer  # type: ignore

from moodmatch_recommendation_service.ml.text_processor import stem, tokenize

logger = logging.getLogger(__name__)

# Canonical label -> related words
SEMANTIC_CLUSTERS: Dict[str, List[str]] = {
    "action": ["adventure", "thriller", "fighting", "chase", "explosive", "intense"],
    "comedy": ["funny", "humor", "laugh", "hilarious", "entertaining", "witty"],
    "drama": ["emotional", "serious", "touching", "powerful", "deep", "moving"],
    "horror": ["scary", "frightening", "terror", "suspense", "creepy", "dark"],
    "romance": ["love", "romantic", "passion", "relationship", "heart", "intimate"],
}

SEMANTIC_BONUS_WEIGHT = 0.3


class ContentAnalyzer:
    """
    Build a TF-IDF vector space over a document corpus and compare vectors.

    Vectors are sparse dicts of term -> weight. Similarity is plain cosine
    plus a bonus for distinct terms that fall in the same semantic cluster.
    """

    def __init__(self, semantic_clusters: Optional[Mapping[str, Iterable[str]]] = None):
        """
        Initialize analyzer.

        Args:
            semantic_clusters: Canonical label -> member words
                (default: SEMANTIC_CLUSTERS)
        """
        clusters = SEMANTIC_CLUSTERS if semantic_clusters is None else semantic_clusters

        # Cluster words go through the same stemmer as document tokens
        self.semantic_clusters: Dict[str, frozenset] = {
            stem(label.lower()): frozenset(stem(word.lower()) for word in words)
            for label, words in clusters.items()
        }

        self.total_documents = 0
        self.document_frequency: Dict[str, int] = {}
        self.idf_scores: Dict[str, float] = {}
        self.document_vectors: Dict[str, Dict[str, float]] = {}

    @property
    def vocabulary(self) -> frozenset:
        """Terms seen during the last corpus build."""
        return frozenset(self.idf_scores)

    def build_corpus(self, documents: List[Dict[str, str]]) -> None:
        """
        Compute document frequencies and IDF scores from scratch.

        Args:
            documents: List of {'id': ..., 'text': ...} dicts
        """
        self.total_documents = len(documents)
        self.document_frequency = {}
        self.idf_scores = {}
        self.document_vectors = {}

        if not documents:
            logger.info("Empty corpus, vocabulary cleared")
            return

        vectorizer = CountVectorizer(
            tokenizer=tokenize,
            lowercase=False,
            token_pattern=None
        )

        try:
            counts = vectorizer.fit_transform([doc.get('text') or "" for doc in documents])
        except ValueError:
            # Raised when no document yields a single token
            logger.warning(f"No usable tokens in {len(documents)} documents, vocabulary is empty")
            return

        doc_freq = np.asarray((counts > 0).sum(axis=0)).ravel()
        terms = vectorizer.get_feature_names_out()

        for term, freq in zip(terms, doc_freq):
            self.document_frequency[str(term)] = int(freq)
            self.idf_scores[str(term)] = math.log(self.total_documents / int(freq))

        for doc in documents:
            self.document_vectors[str(doc['id'])] = self.vectorize(doc.get('text'))

        logger.info(f"✓ Corpus: {self.total_documents} documents, {len(self.idf_scores)} terms")

    def vectorize(self, text: str | None) -> Dict[str, float]:
        """
        Compute the TF-IDF vector of a text.

        Terms outside the vocabulary are dropped.

        Args:
            text: Raw text

        Returns:
            Sparse term -> tfidf dict
        """
        words = tokenize(text)
        if not words:
            return {}

        term_freq: Dict[str, int] = {}
        for word in words:
            term_freq[word] = term_freq.get(word, 0) + 1

        total = len(words)
        return {
            term: (count / total) * self.idf_scores[term]
            for term, count in term_freq.items()
            if term in self.idf_scores
        }

    def get_document_vector(self, document_id: str) -> Dict[str, float]:
        """Cached vector of a corpus document, empty if unknown."""
        return self.document_vectors.get(str(document_id), {})

    def semantic_weight(self, word1: str, word2: str) -> float:
        """
        Semantic closeness of two terms.

        Returns:
            1.0 identical, 0.7 same-cluster members, 0.8 label vs member, else 0
        """
        if word1 == word2:
            return 1.0

        for label, members in self.semantic_clusters.items():
            if word1 in members and word2 in members:
                return 0.7
            if word1 == label and word2 in members:
                return 0.8
            if word2 == label and word1 in members:
                return 0.8

        return 0.0

    def cosine_similarity(self, vec1: Mapping[str, float], vec2: Mapping[str, float]) -> float:
        """
        Cosine similarity with semantic cross-term bonus.

        Args:
            vec1: Sparse vector
            vec2: Sparse vector

        Returns:
            Similarity in [0, 1]; 0 when either vector has zero magnitude
        """
        mag1 = math.sqrt(sum(v * v for v in vec1.values()))
        mag2 = math.sqrt(sum(v * v for v in vec2.values()))

        if mag1 == 0 or mag2 == 0:
            return 0.0

        dot_product = sum(val * vec2.get(term, 0.0) for term, val in vec1.items())

        for word1, val1 in vec1.items():
            for word2, val2 in vec2.items():
                if word1 != word2:
                    weight = self.semantic_weight(word1, word2)
                    if weight:
                        dot_product += val1 * val2 * weight * SEMANTIC_BONUS_WEIGHT

        return max(0.0, min(dot_product / (mag1 * mag2), 1.0))
