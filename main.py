from fischer_random import NUM_POSITIONS, STANDARD_POSITION_ID, decode, to_display_string


def main():
    print(f"fischer-random: {NUM_POSITIONS} positions, standard = {STANDARD_POSITION_ID} ({to_display_string(decode(STANDARD_POSITION_ID))})")


if __name__ == "__main__":
    main()
