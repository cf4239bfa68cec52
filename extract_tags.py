"""
Keyword extraction script.
Loads the dictionaries and prints the top-K tags of a text or file.
"""
import argparse
import os
import sys

from keytags.extractor import TagExtractor

DATA_DIR = "data"
IDF_PATH = os.path.join(DATA_DIR, "idf.txt")
STOP_WORDS_PATH = os.path.join(DATA_DIR, "stop_words.txt")


def load_extractor(idf_path, stop_words_path=None, dict_path=None, show_progress=True):
    if not os.path.exists(idf_path):
        print(f"Error: {idf_path} not found. Pass --idf with a '<word> <idf>' file.")
        return None

    extractor = TagExtractor()
    if dict_path:
        if not os.path.exists(dict_path):
            print(f"Error: {dict_path} not found.")
            return None
        extractor.load_dictionary(dict_path)

    extractor.load_idf(idf_path, show_progress=show_progress)

    if stop_words_path and os.path.exists(stop_words_path):
        extractor.load_stop_words(stop_words_path, show_progress=show_progress)
    elif stop_words_path:
        print(f"[StopWords] {stop_words_path} not found, continuing without stop words")

    return extractor


def print_tags(tags):
    for rank, tag in enumerate(tags, 1):
        print(f"{rank:>3}. {tag.text}\t{tag.weight:.4f}")


def main():
    parser = argparse.ArgumentParser(description="Extract TF-IDF keywords from text")
    parser.add_argument("text", nargs="?", help="Text to analyse (reads --file or stdin if omitted)")
    parser.add_argument("--file", help="Read the text from this file")
    parser.add_argument("--top-k", type=int, default=20, help="Number of tags (-1 for all)")
    parser.add_argument("--method", default="tfidf", choices=["tfidf", "cn"], help="Extraction variant")
    parser.add_argument("--idf", default=IDF_PATH, help="IDF dictionary path")
    parser.add_argument("--stop-words", default=STOP_WORDS_PATH, help="Stop-word dictionary path")
    parser.add_argument("--dict", default=None, help="Optional jieba segmentation dictionary")
    args = parser.parse_args()

    if args.text is not None:
        text = args.text
    elif args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    extractor = load_extractor(args.idf, args.stop_words, args.dict)
    if extractor is None:
        sys.exit(1)

    print("=" * 50)
    if args.method == "cn":
        tags, words = extractor.cn_extract_tags(text, top_k=args.top_k)
        print(f"Top {len(tags)} tags (CN), {len(words)} surviving words")
    else:
        tags = extractor.extract_tags(text, top_k=args.top_k)
        print(f"Top {len(tags)} tags (TF-IDF)")
    print("=" * 50)
    print_tags(tags)


if __name__ == "__main__":
    main()
