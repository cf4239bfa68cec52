"""
Simple terminal UI for the tag extractor.
"""
import argparse

from extract_tags import IDF_PATH, STOP_WORDS_PATH, load_extractor, print_tags


def main():
    parser = argparse.ArgumentParser(description="Terminal tag extraction UI")
    parser.add_argument("--top-k", type=int, default=10, help="Number of tags to show")
    parser.add_argument("--method", default="tfidf", choices=["tfidf", "cn"], help="Extraction variant")
    parser.add_argument("--idf", default=IDF_PATH, help="IDF dictionary path")
    parser.add_argument("--stop-words", default=STOP_WORDS_PATH, help="Stop-word dictionary path")
    parser.add_argument("--dict", default=None, help="Optional jieba segmentation dictionary")
    args = parser.parse_args()

    extractor = load_extractor(args.idf, args.stop_words, args.dict)
    if extractor is None:
        return

    print("Enter text (empty line or 'exit' to quit).")
    while True:
        try:
            text = input("\nText> ").strip()
        except EOFError:
            break

        if not text or text.lower() in {"exit", "quit"}:
            break

        if args.method == "cn":
            tags, words = extractor.cn_extract_tags(text, top_k=args.top_k)
            print(f"\nTop {len(tags)} tags (CN), words: {' / '.join(words)}")
        else:
            tags = extractor.extract_tags(text, top_k=args.top_k)
            print(f"\nTop {len(tags)} tags (TF-IDF):")
        print_tags(tags)


if __name__ == "__main__":
    main()
